"""Fixture plugin: a hook with an incomplete declaration."""

from hookflow.core.hooks import HookDefinition


class MissingDescriptionHook(HookDefinition):
    identifier = "bad-hook"
    plugin = "broken-plugin"
    priority = 0
