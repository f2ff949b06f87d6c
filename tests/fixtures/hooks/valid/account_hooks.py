"""Fixture plugin: account hooks."""

from hookflow.core.hooks import HookDefinition


class UserRegisteredHook(HookDefinition):
    identifier = "user_registered"
    description = "Fired after a user registers."
    plugin = "accounts"
