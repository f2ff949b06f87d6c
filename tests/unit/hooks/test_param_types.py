"""Unit tests for the parameter type vocabulary."""

from hookflow.core.hooks import (
    ParamType,
    get_all_param_types,
    is_checked_param_type,
    normalize_param_type,
)


class TestParamTypes:
    """Tests for ParamType helpers."""

    def test_get_all_param_types(self) -> None:
        """Test that every canonical tag is listed."""
        assert get_all_param_types() == [
            "string",
            "int",
            "bool",
            "float",
            "array",
            "object",
            "callable",
            "null",
            "mixed",
        ]

    def test_aliases_normalize(self) -> None:
        """Test that long spellings map to canonical tags."""
        assert normalize_param_type("integer") is ParamType.INT
        assert normalize_param_type("boolean") is ParamType.BOOL
        assert normalize_param_type("double") is ParamType.FLOAT

    def test_unknown_tags_are_mixed(self) -> None:
        """Test that class names fall into the permissive tag."""
        assert normalize_param_type("App\\Models\\User") is ParamType.MIXED
        assert is_checked_param_type("App\\Models\\User") is False

    def test_members_compare_as_strings(self) -> None:
        """Test that ParamType members can be used as plain tags."""
        assert ParamType.ARRAY == "array"
        assert normalize_param_type(ParamType.CALLABLE) is ParamType.CALLABLE
        assert is_checked_param_type("callable") is True
