"""Hook validation service for reporting on a set of hook definitions.

Validates hooks without registering them and reports which are valid,
which are invalid (with their issues), and which identifiers are
claimed by more than one hook class. Duplicate identifiers are reported,
never rejected: the registry itself lets such hooks coexist.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.logging import get_logger

logger = get_logger(__name__)


def class_reference(hook: HookDefinition) -> str:
    """Get the fully qualified class name of a hook."""
    hook_class = type(hook)
    return f"{hook_class.__module__}.{hook_class.__qualname__}"


@dataclass
class ValidHook:
    """A hook that passed validation."""

    identifier: str
    class_name: str


@dataclass
class InvalidHook:
    """A hook that failed validation, with its issues."""

    identifier: str
    class_name: str
    issues: list[str]


@dataclass
class DuplicateIdentifier:
    """An identifier claimed by more than one hook class."""

    identifier: str
    classes: list[str]


@dataclass
class HookValidationReport:
    """Result of validating a set of hooks.

    Attributes:
        valid: Hooks with no validation issues.
        invalid: Hooks with at least one issue.
        duplicates: Identifiers claimed by several distinct classes.
        errors: Errors raised while loading or validating hooks.
    """

    valid: list[ValidHook] = field(default_factory=list)
    invalid: list[InvalidHook] = field(default_factory=list)
    duplicates: list[DuplicateIdentifier] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def found_hooks(self) -> bool:
        """Check whether any hook was validated."""
        return bool(self.valid or self.invalid)

    @property
    def is_successful(self) -> bool:
        """Successful when no hooks were found or at least one is valid."""
        return not self.found_hooks or bool(self.valid)

    def add_error(self, message: str) -> None:
        """Record an error that prevented a hook from being validated."""
        self.errors.append(message)

    def to_dict(self, exclude_duplicates: bool = False) -> dict[str, Any]:
        """Convert the report to a JSON-serializable dictionary.

        Args:
            exclude_duplicates: Drop duplicated identifiers from ``valid``.

        Returns:
            Dictionary with valid, invalid, duplicates and errors keys.
        """
        duplicated = {duplicate.identifier for duplicate in self.duplicates}
        valid = [
            entry
            for entry in self.valid
            if not (exclude_duplicates and entry.identifier in duplicated)
        ]

        return {
            "valid": [
                {"identifier": entry.identifier, "class": entry.class_name}
                for entry in valid
            ],
            "invalid": [
                {
                    "identifier": entry.identifier,
                    "class": entry.class_name,
                    "issues": list(entry.issues),
                }
                for entry in self.invalid
            ],
            "duplicates": [
                {"identifier": entry.identifier, "classes": list(entry.classes)}
                for entry in self.duplicates
            ],
            "errors": list(self.errors),
        }


class HookValidationService:
    """Service for validating hook definitions in bulk."""

    @classmethod
    def validate_hook(cls, hook: HookDefinition, report: HookValidationReport) -> None:
        """Validate one hook and record the outcome in a report.

        Args:
            hook: The hook to validate.
            report: The report to update.
        """
        class_name = class_reference(hook)
        identifier = hook.identifier

        if not identifier:
            report.invalid.append(
                InvalidHook(
                    identifier="",
                    class_name=class_name,
                    issues=["Hook identifier cannot be empty"],
                )
            )
            return

        issues = hook.validate()
        if issues:
            report.invalid.append(
                InvalidHook(identifier=identifier, class_name=class_name, issues=issues)
            )
        else:
            report.valid.append(ValidHook(identifier=identifier, class_name=class_name))

    @classmethod
    def validate_hooks(
        cls,
        hooks: Iterable[HookDefinition],
        report: HookValidationReport | None = None,
    ) -> HookValidationReport:
        """Validate hooks and detect duplicate identifiers.

        Args:
            hooks: The hooks to validate.
            report: Optional report to extend, e.g. one already holding
                    load errors.

        Returns:
            The validation report.
        """
        report = report or HookValidationReport()

        for hook in hooks:
            try:
                cls.validate_hook(hook, report)
            except Exception as e:
                report.add_error(f"Failed to validate hook {class_reference(hook)}: {e}")
                logger.warning(
                    "Hook validation raised",
                    hook_class=class_reference(hook),
                    error=str(e),
                )

        report.duplicates = cls.find_duplicates(report.valid)

        logger.debug(
            "Hooks validated",
            valid=len(report.valid),
            invalid=len(report.invalid),
            duplicates=len(report.duplicates),
            errors=len(report.errors),
        )
        return report

    @staticmethod
    def find_duplicates(valid: Iterable[ValidHook]) -> list[DuplicateIdentifier]:
        """Find identifiers used by more than one distinct hook class.

        Args:
            valid: Valid hook entries, in validation order.

        Returns:
            One entry per duplicated identifier, classes in first-seen order.
        """
        classes_by_identifier: dict[str, list[str]] = {}
        for entry in valid:
            classes = classes_by_identifier.setdefault(entry.identifier, [])
            if entry.class_name not in classes:
                classes.append(entry.class_name)

        return [
            DuplicateIdentifier(identifier=identifier, classes=classes)
            for identifier, classes in classes_by_identifier.items()
            if len(classes) > 1
        ]
