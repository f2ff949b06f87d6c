"""Unit tests for the example user-management hooks."""

from datetime import datetime

import pytest

from hookflow.core.hooks import HookExecutor, HookRegistry, default_identifier
from hookflow.domain.entities.hook_exceptions import HookArgumentError
from hookflow.examples.user_hooks import BeforeUserCreatedHook, FilterUserDataHook


class TestBeforeUserCreatedHook:
    """Tests for BeforeUserCreatedHook."""

    def test_uses_default_identifier(self) -> None:
        """Test that the hook is identified by its class path."""
        hook = BeforeUserCreatedHook()

        assert hook.identifier == default_identifier(BeforeUserCreatedHook)
        assert hook.identifier == "hookflow\\examples\\user_hooks\\BeforeUserCreatedHook"
        assert hook.validate() == []

    def test_executes_through_registry(self, registry: HookRegistry) -> None:
        """Test that the action accepts user data and context."""
        hook = BeforeUserCreatedHook()
        registry.register(hook)

        result = registry.execute(hook.identifier, {"user_data": {"name": "Ada"}, "context": "web"})

        assert result is None

    def test_requires_context(self, executor: HookExecutor) -> None:
        """Test that both declared parameters are required."""
        with pytest.raises(HookArgumentError):
            executor.execute(BeforeUserCreatedHook(), {"user_data": {}, "extra": 1})


class TestFilterUserDataHook:
    """Tests for FilterUserDataHook."""

    def test_sanitizes_existing_user(self, executor: HookExecutor) -> None:
        """Test that fields are trimmed and the email lowercased."""
        user_data = {"name": "  Ada  ", "email": " Ada@Example.COM ", "username": " ada "}

        result = executor.execute(
            FilterUserDataHook(), {"user_data": user_data, "is_new_user": False}
        )

        assert result == {"name": "Ada", "email": "ada@example.com", "username": "ada"}
        assert user_data["name"] == "  Ada  "

    def test_new_user_is_enriched(self, registry: HookRegistry) -> None:
        """Test that new users get a creation time and pending status."""
        registry.register(FilterUserDataHook())
        form = {"email": "NEW@EXAMPLE.COM"}

        result = registry.execute(
            "filter_user_data", {"value": form, "user_data": form, "is_new_user": True}
        )

        assert result["email"] == "new@example.com"
        assert result["status"] == "pending"
        assert isinstance(result["created_at"], datetime)
        assert result["created_at"].tzinfo is not None

    def test_non_string_fields_are_left_alone(self, executor: HookExecutor) -> None:
        """Test that only string fields are trimmed."""
        result = executor.execute(
            FilterUserDataHook(), {"user_data": {"name": None, "age": 30}, "is_new_user": False}
        )
        assert result == {"name": None, "age": 30}

    def test_rejects_non_bool_flag(self, executor: HookExecutor) -> None:
        """Test that is_new_user must be a bool."""
        with pytest.raises(HookArgumentError, match='"is_new_user"'):
            executor.execute(FilterUserDataHook(), {"user_data": {}, "is_new_user": "yes"})

    def test_requires_parameters(self) -> None:
        """Test the extra rule that the hook declares parameters."""

        class NoParameters(FilterUserDataHook):
            parameters = {}

        assert NoParameters().validate() == ["Hook must accept at least one argument"]
        assert FilterUserDataHook().validate() == []
