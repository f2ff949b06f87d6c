"""Domain layer for HookFlow."""
