"""Infrastructure layer for HookFlow (discovery and documentation)."""
