"""Hook executor - argument validation and single-hook execution.

The executor checks call-time arguments against a hook's declared
parameters, then runs either the filter path (apply) or the action path
(execute). Faults raised inside a hook body are not caught.
"""

from collections.abc import Mapping
from typing import Any

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.hooks.param_types import ParamType, normalize_param_type
from hookflow.core.logging import get_logger
from hookflow.domain.entities.hook_exceptions import HookArgumentError

logger = get_logger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)
_ARRAY_TYPES = (list, tuple, dict)


class HookExecutor:
    """Validates arguments and executes a single hook.

    Example:
        executor = HookExecutor()
        executor.execute(hook, {"user_data": {...}, "context": "web"})
    """

    def execute(self, hook: HookDefinition, args: Mapping[str, Any]) -> Any:
        """Execute a hook with the given arguments.

        Args:
            hook: The hook to execute.
            args: Name-keyed arguments for the hook.

        Returns:
            The filtered value for filters, None for actions.

        Raises:
            HookArgumentError: If the arguments don't match the hook's parameters.
        """
        self.validate_arguments(hook, args)

        if hook.is_filter:
            return self._execute_filter(hook, args)

        self._execute_action(hook, args)
        return None

    def _execute_filter(self, hook: HookDefinition, args: Mapping[str, Any]) -> Any:
        # The first argument, in insertion order, is the value being filtered
        value = next(iter(args.values()), None)
        logger.debug("Applying filter hook", hook_identifier=hook.identifier)
        return hook.apply(value, args)

    def _execute_action(self, hook: HookDefinition, args: Mapping[str, Any]) -> None:
        logger.debug("Executing action hook", hook_identifier=hook.identifier)
        hook.execute(args)

    def validate_arguments(self, hook: HookDefinition, args: Mapping[str, Any]) -> None:
        """Validate that the provided arguments match the hook's parameters.

        Args:
            hook: The hook whose parameters are checked.
            args: Name-keyed arguments.

        Raises:
            HookArgumentError: On too few arguments, a missing argument,
                or a type mismatch.
        """
        identifier = hook.identifier
        accepted_args = hook.accepted_args

        if len(args) < accepted_args:
            self._fail(
                f"Hook {identifier} requires {accepted_args} arguments, "
                f"{len(args)} provided",
                identifier,
            )

        for name, type_tag in hook.parameters.items():
            if name not in args:
                self._fail(
                    f'Missing required argument "{name}" for hook {identifier}',
                    identifier,
                )

            value = args[name]
            if not self.validate_argument_type(value, type_tag):
                self._fail(
                    f'Invalid type for argument "{name}" in hook {identifier}. '
                    f"Expected {type_tag}, got {type(value).__name__}",
                    identifier,
                )

    def validate_argument_type(self, value: Any, expected_type: str) -> bool:
        """Check a value against a declared type tag.

        Unknown tags, including class names, are accepted unconditionally.

        Args:
            value: The runtime value.
            expected_type: The declared type tag.

        Returns:
            True if the value satisfies the tag.
        """
        param_type = normalize_param_type(expected_type)

        if param_type is ParamType.STRING:
            return isinstance(value, str)
        if param_type is ParamType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        if param_type is ParamType.BOOL:
            return isinstance(value, bool)
        if param_type is ParamType.FLOAT:
            return isinstance(value, float)
        if param_type is ParamType.ARRAY:
            return isinstance(value, _ARRAY_TYPES)
        if param_type is ParamType.OBJECT:
            return value is not None and not isinstance(value, _SCALAR_TYPES + _ARRAY_TYPES)
        if param_type is ParamType.CALLABLE:
            return callable(value)
        if param_type is ParamType.NULL:
            return value is None
        return True

    def _fail(self, message: str, identifier: str) -> None:
        logger.warning("Hook argument validation failed", hook_identifier=identifier, error=message)
        raise HookArgumentError(message, identifier)
