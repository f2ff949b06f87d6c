"""Unit tests for function-based hooks and the decorator API."""

import pytest

from hookflow.core.hooks import FunctionHook, HookDecorator, HookRegistry
from hookflow.domain.entities.hook_exceptions import HookArgumentError, HookValidationError


class TestHookDecorator:
    """Tests for HookDecorator."""

    def test_action_decorator_registers_hook(self, registry: HookRegistry) -> None:
        """Test that decorator syntax registers an action hook."""
        hooks = HookDecorator(registry)
        calls = []

        @hooks.action("user_created", plugin="audit", parameters={"user_data": "array"})
        def log_user_created(args):
            """Record every created user."""
            calls.append(args["user_data"])

        hook = registry.get("user_created")
        assert isinstance(hook, FunctionHook)
        assert hook.is_filter is False
        assert hook.func is log_user_created

        registry.execute("user_created", {"user_data": ["ada"]})
        assert calls == [["ada"]]

    def test_decorator_returns_original_function(self, registry: HookRegistry) -> None:
        """Test that the decorated function stays directly callable."""
        hooks = HookDecorator(registry)

        def shout(value, args):
            """Upper-case the value."""
            return value.upper()

        assert hooks.filter("shout", plugin="text")(shout) is shout
        assert shout("hi", {}) == "HI"

    def test_filter_decorator_chains_values(self, registry: HookRegistry) -> None:
        """Test that filter functions receive and return the value."""
        hooks = HookDecorator(registry)

        @hooks.filter("slug", plugin="text", priority=20)
        def lower(value, args):
            """Lower-case the value."""
            return value.lower()

        @hooks.filter("slug", plugin="text", priority=10)
        def dashes(value, args):
            """Replace spaces with dashes."""
            return value.replace(" ", "-")

        assert registry.execute("slug", {"value": "Hello World"}) == "hello-world"

    def test_description_defaults_to_first_docstring_line(self, registry: HookRegistry) -> None:
        """Test that the docstring provides the description."""
        hooks = HookDecorator(registry)

        @hooks.action("documented", plugin="docs")
        def documented(args):
            """First line.

            More detail that is not part of the description.
            """

        assert registry.get("documented").description == "First line."

    def test_explicit_description_wins(self, registry: HookRegistry) -> None:
        """Test that an explicit description overrides the docstring."""
        hooks = HookDecorator(registry)

        @hooks.action("described", description="Explicit", plugin="docs")
        def described(args):
            """Docstring."""

        assert registry.get("described").description == "Explicit"

    def test_undocumented_function_without_description_is_rejected(
        self, registry: HookRegistry
    ) -> None:
        """Test that the decorator validates the hook it builds."""
        hooks = HookDecorator(registry)

        with pytest.raises(HookValidationError, match="Hook description cannot be empty"):

            @hooks.action("silent", plugin="docs")
            def silent(args):
                pass

        assert registry.has("silent") is False

    def test_decorator_with_priority(self, registry: HookRegistry) -> None:
        """Test that decorator priority is applied."""
        hooks = HookDecorator(registry)

        @hooks.action("ordered", plugin="p", priority=100, trigger_point="Service.run")
        def ordered(args):
            """Run first."""

        hook = registry.get("ordered")
        assert hook.priority == 100
        assert hook.trigger_point == "Service.run"

    def test_function_hook_arguments_are_validated(self, registry: HookRegistry) -> None:
        """Test that declared parameters are checked on dispatch."""
        hooks = HookDecorator(registry)

        @hooks.action("typed", plugin="p", parameters={"count": "int"})
        def typed(args):
            """Needs a count."""

        with pytest.raises(HookArgumentError):
            registry.execute("typed", {"count": "many"})

    def test_remove(self, registry: HookRegistry) -> None:
        """Test that remove() delegates to the registry."""
        hooks = HookDecorator(registry)

        @hooks.action("temporary", plugin="p")
        def temporary(args):
            """Short lived."""

        hooks.remove("temporary")

        assert registry.has("temporary") is False
        assert hooks.registry is registry


class TestFunctionHook:
    """Tests for FunctionHook used directly."""

    def test_repr_names_function(self) -> None:
        """Test that repr() shows the wrapped function."""

        def handler(args):
            """Handle."""

        text = repr(FunctionHook(handler, "handled", plugin="p"))

        assert "action" in text
        assert "'handled'" in text
        assert "handler" in text

    def test_accepted_args_counts_parameters(self) -> None:
        """Test that parameters drive accepted_args."""
        hook = FunctionHook(print, "printer", "Prints", "p", parameters={"a": "string", "b": "int"})
        assert hook.accepted_args == 2
