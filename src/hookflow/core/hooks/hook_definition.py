"""Hook definition - the contract every hook implements.

A hook is a named extension point implementation. Subclasses describe
themselves through class attributes and implement either execute()
(actions) or apply() (filters), selected by ``is_filter``.

IMPORTANT: This is a STABLE API CONTRACT. Plugins subclass
           HookDefinition directly, so attribute names and validation
           messages cannot change without breaking them.

Example:
    class FilterTitleHook(HookDefinition):
        identifier = "filter_title"
        description = "Normalizes post titles before saving."
        plugin = "blog"
        parameters = {"title": "string"}
        trigger_point = "PostRepository.save"
        is_filter = True

        def apply(self, value, args):
            return value.strip().title()
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from hookflow.domain.entities.hook_exceptions import HookValidationError

DEFAULT_PRIORITY = 10

# Backslashes separate the namespace segments of default identifiers
IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_\\\-]*$")
PARAMETER_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def default_identifier(hook_class: type) -> str:
    """Build the identifier used when a hook class does not set one.

    Args:
        hook_class: The hook's class.

    Returns:
        The module path and qualified class name joined by backslashes,
        e.g. "plugins\\users\\UserCreatedHook".
    """
    segments = f"{hook_class.__module__}.{hook_class.__qualname__}".split(".")
    return "\\".join(segment for segment in segments if segment != "<locals>")


class HookDefinition:
    """Base class for action and filter hooks.

    Attributes:
        identifier: Dispatch key. Settable on the class or per instance.
        description: Human-readable description. Required.
        plugin: Owning plugin tag used for grouping. Required.
        parameters: Ordered mapping of argument name to type tag.
        trigger_point: Where in the host application the hook fires.
        priority: Dispatch priority (higher = earlier). Must be >= 1.
        is_filter: True for filters (apply), False for actions (execute).
    """

    description: str = ""
    plugin: str = ""
    parameters: Mapping[str, str] = MappingProxyType({})
    trigger_point: str = ""
    priority: int = DEFAULT_PRIORITY
    is_filter: bool = False

    @property
    def identifier(self) -> str:
        """Unique dispatch key. Defaults to the namespaced class name."""
        try:
            return self._identifier
        except AttributeError:
            return default_identifier(type(self))

    @identifier.setter
    def identifier(self, value: str) -> None:
        self._identifier = value

    @property
    def accepted_args(self) -> int:
        """Minimum number of arguments required at call time."""
        return len(self.parameters)

    def execute(self, args: Mapping[str, Any]) -> None:
        """Run the action. Override in action hooks.

        Args:
            args: The arguments passed to the hook.
        """

    def apply(self, value: Any, args: Mapping[str, Any]) -> Any:
        """Transform a value. Override in filter hooks.

        Args:
            value: The value to filter.
            args: All arguments passed to the hook.

        Returns:
            The filtered value.
        """
        return value

    def validate(self) -> list[str]:
        """Validate the hook's static declaration.

        Call-time arguments are never inspected here.

        Returns:
            List of validation issues (empty if valid).
        """
        issues: list[str] = []

        identifier = self.identifier
        if not identifier:
            issues.append("Hook identifier cannot be empty")
        elif not IDENTIFIER_PATTERN.match(identifier):
            issues.append(
                "Hook identifier should only contain letters, numbers, "
                "underscores, backslashes, and hyphens"
            )

        if not self.description:
            issues.append("Hook description cannot be empty")

        if not self.plugin:
            issues.append("Hook plugin cannot be empty")

        for name, type_tag in self.parameters.items():
            if not name:
                issues.append("Parameter name cannot be empty")
            if not type_tag:
                issues.append(f"Parameter '{name}' has no type specified")
            if not PARAMETER_NAME_PATTERN.match(name or ""):
                issues.append(f"Invalid parameter name '{name}'")

        if self.priority < 1:
            issues.append("Hook priority must be greater than 0")

        return issues

    def validate_or_fail(self) -> None:
        """Validate the hook and raise if any issue is found.

        Raises:
            HookValidationError: Carrying every issue found.
        """
        issues = self.validate()
        if issues:
            raise HookValidationError(issues)

    def __repr__(self) -> str:
        kind = "filter" if self.is_filter else "action"
        return (
            f"<{type(self).__name__} {kind} identifier={self.identifier!r} "
            f"priority={self.priority}>"
        )
