"""Domain entities for HookFlow."""

from hookflow.domain.entities.hook_exceptions import (
    HookArgumentError,
    HookError,
    HookNotFoundError,
    HookValidationError,
)

__all__ = [
    "HookError",
    "HookValidationError",
    "HookArgumentError",
    "HookNotFoundError",
]
