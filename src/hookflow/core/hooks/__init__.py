"""Hook system core module.

This module provides the hook registration, validation and dispatch
engine for HookFlow. Plugins announce extension points as hooks
(actions or filters) and other components dispatch them by identifier.

IMPORTANT: This is a STABLE API CONTRACT. The public interfaces in
           this module should not have breaking changes.

Example usage:
    from hookflow.core.hooks import HookDefinition, HookRegistry

    class UserCreatedHook(HookDefinition):
        identifier = "user_created"
        description = "Fired after a user account is created."
        plugin = "user-management"
        parameters = {"user_data": "array", "context": "string"}

        def execute(self, args):
            send_welcome_email(args["user_data"])

    registry = HookRegistry()
    registry.register(UserCreatedHook())
    registry.execute("user_created", {"user_data": user, "context": "web"})
"""

from hookflow.core.hooks.hook_decorator import FunctionHook, HookDecorator
from hookflow.core.hooks.hook_definition import (
    DEFAULT_PRIORITY,
    HookDefinition,
    default_identifier,
)
from hookflow.core.hooks.hook_executor import HookExecutor
from hookflow.core.hooks.hook_registry import HookRegistry
from hookflow.core.hooks.param_types import (
    ParamType,
    get_all_param_types,
    is_checked_param_type,
    normalize_param_type,
)

__all__ = [
    # Definition
    "HookDefinition",
    "DEFAULT_PRIORITY",
    "default_identifier",
    # Execution
    "HookExecutor",
    "HookRegistry",
    # Decorator
    "FunctionHook",
    "HookDecorator",
    # Parameter types
    "ParamType",
    "get_all_param_types",
    "is_checked_param_type",
    "normalize_param_type",
]
