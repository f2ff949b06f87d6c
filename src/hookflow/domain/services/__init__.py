"""Domain services for HookFlow."""

from hookflow.domain.services.hook_validation_service import (
    DuplicateIdentifier,
    HookValidationReport,
    HookValidationService,
    InvalidHook,
    ValidHook,
    class_reference,
)

__all__ = [
    "HookValidationService",
    "HookValidationReport",
    "ValidHook",
    "InvalidHook",
    "DuplicateIdentifier",
    "class_reference",
]
