"""HookFlow - priority-ordered action and filter hooks.

Plugins announce extension points as named hooks; other components
attach behaviour and dispatch them by identifier, without direct
coupling.
"""

__version__ = "0.1.0"

from hookflow.core.hooks import (
    FunctionHook,
    HookDecorator,
    HookDefinition,
    HookExecutor,
    HookRegistry,
    ParamType,
)
from hookflow.domain.entities import (
    HookArgumentError,
    HookError,
    HookNotFoundError,
    HookValidationError,
)

__all__ = [
    "__version__",
    "HookDefinition",
    "HookExecutor",
    "HookRegistry",
    "HookDecorator",
    "FunctionHook",
    "ParamType",
    "HookError",
    "HookValidationError",
    "HookArgumentError",
    "HookNotFoundError",
]
