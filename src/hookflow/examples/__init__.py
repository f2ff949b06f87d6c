"""Example hook plugins shipped with HookFlow."""
