"""Hook registry - Central hook registration and dispatch engine.

The HookRegistry is the core of the hook system. It provides:
- Validate-then-store registration, single or all-or-nothing batches
- Buckets of hooks per identifier, kept in priority order
- Lookup and filtering by identifier, plugin and kind
- Dispatch of every hook in a bucket, chaining filter results

IMPORTANT: This is a STABLE API. Changes to the registration interface
           would be breaking changes for users who have built plugins.
"""

import threading
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.hooks.hook_executor import HookExecutor
from hookflow.core.logging import get_logger
from hookflow.domain.entities.hook_exceptions import HookNotFoundError

logger = get_logger(__name__)


def _by_priority(hooks: Iterable[HookDefinition]) -> list[HookDefinition]:
    # Stable: equal priorities keep registration order
    return sorted(hooks, key=lambda hook: hook.priority, reverse=True)


class HookRegistry:
    """Central hook registration and dispatch engine.

    Hooks sharing an identifier coexist in one bucket and all fire,
    higher priority first. Registration and removal are serialized by a
    lock; dispatch runs hook bodies on a snapshot taken under that lock.

    Example:
        registry = HookRegistry()

        registry.register(FilterUserDataHook())
        registry.register(AuditUserDataHook())

        user_data = registry.execute(
            "filter_user_data",
            {"value": user_data, "user_data": user_data, "is_new_user": True},
        )
    """

    def __init__(self, executor: Optional[HookExecutor] = None) -> None:
        """Initialize the hook registry.

        Args:
            executor: Executor used to validate dispatch arguments.
        """
        self._executor = executor or HookExecutor()
        self._hooks: dict[str, list[HookDefinition]] = {}
        self._lock = threading.RLock()

    @property
    def executor(self) -> HookExecutor:
        """Get the executor used for argument validation."""
        return self._executor

    def register(self, hook: HookDefinition) -> None:
        """Validate and register a hook.

        Args:
            hook: The hook to register.

        Raises:
            HookValidationError: If the hook definition is invalid.
        """
        hook.validate_or_fail()

        identifier = hook.identifier
        with self._lock:
            bucket = self._hooks.setdefault(identifier, [])
            bucket.append(hook)
            bucket[:] = _by_priority(bucket)

        logger.debug(
            "Hook registered",
            hook_identifier=identifier,
            plugin=hook.plugin,
            priority=hook.priority,
            is_filter=hook.is_filter,
        )

    def register_many(self, hooks: Iterable[HookDefinition]) -> None:
        """Register several hooks, all or none.

        Every hook is validated before any is stored.

        Args:
            hooks: The hooks to register.

        Raises:
            HookValidationError: For the first invalid hook; nothing is registered.
        """
        hooks = list(hooks)
        for hook in hooks:
            hook.validate_or_fail()

        with self._lock:
            for hook in hooks:
                self.register(hook)

    def get(self, identifier: str) -> Optional[HookDefinition]:
        """Get the highest-priority hook for an identifier.

        Args:
            identifier: The hook identifier.

        Returns:
            The first hook in the bucket, or None if nothing is registered.
        """
        with self._lock:
            bucket = self._hooks.get(identifier)
            return bucket[0] if bucket else None

    def get_all(self, identifier: str) -> list[HookDefinition]:
        """Get every hook registered for an identifier, in priority order."""
        with self._lock:
            return list(self._hooks.get(identifier, []))

    def has(self, identifier: str) -> bool:
        """Check whether any hook is registered for an identifier."""
        with self._lock:
            return bool(self._hooks.get(identifier))

    def all(self) -> list[HookDefinition]:
        """Get all registered hooks.

        Returns:
            Hooks grouped by bucket in identifier registration order,
            each bucket in priority order.
        """
        with self._lock:
            return [hook for bucket in self._hooks.values() for hook in bucket]

    def identifiers(self) -> list[str]:
        """Get every identifier with at least one registered hook."""
        with self._lock:
            return [identifier for identifier, bucket in self._hooks.items() if bucket]

    def for_plugin(self, plugin: str) -> list[HookDefinition]:
        """Get all hooks owned by a plugin."""
        return [hook for hook in self.all() if hook.plugin == plugin]

    def filters(self) -> list[HookDefinition]:
        """Get all filter hooks."""
        return [hook for hook in self.all() if hook.is_filter]

    def actions(self) -> list[HookDefinition]:
        """Get all action hooks."""
        return [hook for hook in self.all() if not hook.is_filter]

    def remove(self, identifier: str) -> None:
        """Remove every hook registered for an identifier.

        Removing an unknown identifier is a no-op.
        """
        with self._lock:
            removed = self._hooks.pop(identifier, None)

        if removed:
            logger.debug("Hooks removed", hook_identifier=identifier, count=len(removed))

    def clear(self) -> None:
        """Remove all registered hooks."""
        with self._lock:
            count = sum(len(bucket) for bucket in self._hooks.values())
            self._hooks.clear()

        logger.debug("Hooks cleared", count=count)

    def execute(self, identifier: str, args: Mapping[str, Any]) -> Any:
        """Dispatch every hook registered for an identifier.

        Hooks run in priority order (higher first). Each hook's arguments
        are validated right before it runs. The filtered value starts as
        ``args["value"]`` (None if absent) and is threaded through every
        filter; actions run for their side effects and leave it unchanged.

        A failure in any hook, whether an argument error or an error
        raised by its body, aborts the rest of the chain and propagates.

        Args:
            identifier: The hook identifier.
            args: Name-keyed arguments passed to every hook.

        Returns:
            The value after the last filter.

        Raises:
            HookNotFoundError: If no hook is registered for the identifier.
            HookArgumentError: If a hook's arguments don't validate.
        """
        hooks = _by_priority(self.get_all(identifier))

        if not hooks:
            logger.warning("Hook not found", hook_identifier=identifier)
            raise HookNotFoundError(identifier)

        logger.debug("Executing hooks", hook_identifier=identifier, hook_count=len(hooks))

        result = args.get("value")
        for hook in hooks:
            self._executor.validate_arguments(hook, args)
            if hook.is_filter:
                result = hook.apply(result, args)
            else:
                hook.execute(args)

        return result

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._hooks.values())
