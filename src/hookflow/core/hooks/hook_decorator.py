"""Hook decorator API for function-based hooks.

This module lets a plain function become a registered hook without
writing a HookDefinition subclass:

    hooks = HookDecorator(registry)

    @hooks.action("user_created", plugin="audit", parameters={"user_data": "array"})
    def log_user_created(args):
        audit_log.write(args["user_data"])

    @hooks.filter("filter_user_data", plugin="users", priority=20)
    def lowercase_email(value, args):
        return {**value, "email": value["email"].lower()}
"""

from collections.abc import Callable, Mapping
from typing import Any, Optional, TypeVar

from hookflow.core.hooks.hook_definition import DEFAULT_PRIORITY, HookDefinition
from hookflow.core.hooks.hook_registry import HookRegistry

F = TypeVar("F", bound=Callable[..., Any])


class FunctionHook(HookDefinition):
    """A hook whose behaviour is a wrapped function.

    Actions call ``func(args)``; filters call ``func(value, args)``.

    Attributes:
        func: The wrapped function.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        identifier: str,
        description: Optional[str] = None,
        plugin: str = "",
        parameters: Optional[Mapping[str, str]] = None,
        trigger_point: str = "",
        priority: int = DEFAULT_PRIORITY,
        is_filter: bool = False,
    ) -> None:
        self.func = func
        self.identifier = identifier
        self.description = description if description is not None else _first_doc_line(func)
        self.plugin = plugin
        self.parameters = dict(parameters or {})
        self.trigger_point = trigger_point
        self.priority = priority
        self.is_filter = is_filter

    def execute(self, args: Mapping[str, Any]) -> None:
        self.func(args)

    def apply(self, value: Any, args: Mapping[str, Any]) -> Any:
        return self.func(value, args)

    def __repr__(self) -> str:
        kind = "filter" if self.is_filter else "action"
        return (
            f"<FunctionHook {kind} identifier={self.identifier!r} "
            f"func={getattr(self.func, '__qualname__', self.func)!r}>"
        )


def _first_doc_line(func: Callable[..., Any]) -> str:
    doc = (func.__doc__ or "").strip()
    return doc.splitlines()[0].strip() if doc else ""


class HookDecorator:
    """Provides decorator syntax for hook registration.

    Attributes:
        _registry: The underlying HookRegistry.
    """

    def __init__(self, registry: HookRegistry) -> None:
        """Initialize with a HookRegistry.

        Args:
            registry: The HookRegistry to delegate to.
        """
        self._registry = registry

    @property
    def registry(self) -> HookRegistry:
        """Get the underlying hook registry."""
        return self._registry

    def action(
        self,
        identifier: str,
        description: Optional[str] = None,
        plugin: str = "",
        parameters: Optional[Mapping[str, str]] = None,
        trigger_point: str = "",
        priority: int = DEFAULT_PRIORITY,
    ) -> Callable[[F], F]:
        """Register the decorated function as an action hook.

        The function is called as ``func(args)``.

        Args:
            identifier: Dispatch identifier.
            description: Description; defaults to the docstring's first line.
            plugin: Owning plugin tag.
            parameters: Parameter name to type tag mapping.
            trigger_point: Where the hook fires.
            priority: Execution priority (higher = earlier).

        Returns:
            Decorator function.

        Raises:
            HookValidationError: When the decorator is applied to a function
                and the resulting hook is invalid.
        """
        return self._create_decorator(
            identifier=identifier,
            description=description,
            plugin=plugin,
            parameters=parameters,
            trigger_point=trigger_point,
            priority=priority,
            is_filter=False,
        )

    def filter(
        self,
        identifier: str,
        description: Optional[str] = None,
        plugin: str = "",
        parameters: Optional[Mapping[str, str]] = None,
        trigger_point: str = "",
        priority: int = DEFAULT_PRIORITY,
    ) -> Callable[[F], F]:
        """Register the decorated function as a filter hook.

        The function is called as ``func(value, args)`` and must return
        the filtered value. Arguments are as for action().
        """
        return self._create_decorator(
            identifier=identifier,
            description=description,
            plugin=plugin,
            parameters=parameters,
            trigger_point=trigger_point,
            priority=priority,
            is_filter=True,
        )

    def remove(self, identifier: str) -> None:
        """Remove every hook registered for an identifier."""
        self._registry.remove(identifier)

    def _create_decorator(
        self,
        identifier: str,
        description: Optional[str],
        plugin: str,
        parameters: Optional[Mapping[str, str]],
        trigger_point: str,
        priority: int,
        is_filter: bool,
    ) -> Callable[[F], F]:
        def decorator(func: F) -> F:
            hook = FunctionHook(
                func,
                identifier=identifier,
                description=description,
                plugin=plugin,
                parameters=parameters,
                trigger_point=trigger_point,
                priority=priority,
                is_filter=is_filter,
            )
            self._registry.register(hook)
            return func

        return decorator
