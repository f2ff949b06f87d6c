"""Example user-management hooks.

Two reference hooks a host application could ship:

- BeforeUserCreatedHook: an action fired before a user is created. It
  keeps the default identifier, its backslash-namespaced class name.
- FilterUserDataHook: a filter that sanitizes user data before it is
  saved, registered under the custom identifier "filter_user_data".

Example:
    registry = HookRegistry()
    registry.register(BeforeUserCreatedHook())
    registry.register(FilterUserDataHook())

    registry.execute(
        default_identifier(BeforeUserCreatedHook),
        {"user_data": form_data, "context": "web"},
    )
    user_data = registry.execute(
        "filter_user_data",
        {"value": form_data, "user_data": form_data, "is_new_user": True},
    )
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.logging import get_logger

logger = get_logger(__name__)

TRIMMED_FIELDS = ("name", "email", "username")


class BeforeUserCreatedHook(HookDefinition):
    """Action hook triggered before a user is created."""

    description = (
        "Triggered before a new user is created in the system. Use this hook to "
        "perform validation, modify user data, or integrate with external systems."
    )
    plugin = "user-management"
    parameters = {
        "user_data": "array",
        "context": "string",
    }
    trigger_point = "UserController.store"

    def execute(self, args: Mapping[str, Any]) -> None:
        logger.info(
            "User creation initiated",
            user_fields=sorted(args["user_data"]),
            context=args["context"],
        )


class FilterUserDataHook(HookDefinition):
    """Filter hook that sanitizes user data before it is saved.

    Besides the library rules, this hook requires at least one parameter.
    """

    identifier = "filter_user_data"
    description = (
        "Filters user data before it is saved to the database. Use this hook to "
        "modify, sanitize, or enrich user data."
    )
    plugin = "user-management"
    parameters = {
        "user_data": "array",
        "is_new_user": "bool",
    }
    trigger_point = "UserRepository.save"
    is_filter = True

    def apply(self, value: Any, args: Mapping[str, Any]) -> dict[str, Any]:
        user_data = dict(value or {})

        for field_name in TRIMMED_FIELDS:
            if isinstance(user_data.get(field_name), str):
                user_data[field_name] = user_data[field_name].strip()

        if isinstance(user_data.get("email"), str):
            user_data["email"] = user_data["email"].lower()

        if args.get("is_new_user"):
            user_data["created_at"] = datetime.now(timezone.utc)
            user_data["status"] = "pending"

        return user_data

    def validate(self) -> list[str]:
        issues = super().validate()
        if not self.parameters:
            issues.append("Hook must accept at least one argument")
        return issues
