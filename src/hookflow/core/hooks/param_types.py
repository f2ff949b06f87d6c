"""Parameter type vocabulary for hook argument contracts.

A hook declares its parameters as a mapping of name to type tag. Tags
come from a small closed vocabulary; any other tag (for example a class
name) is treated as MIXED and performs no runtime check.

IMPORTANT: Adding aliases is allowed (non-breaking), but removing or
           renaming a tag is a breaking change for existing hooks.
"""

from enum import Enum


class ParamType(str, Enum):
    """Supported parameter type tags."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    ARRAY = "array"
    OBJECT = "object"
    CALLABLE = "callable"
    NULL = "null"
    MIXED = "mixed"


# Alternate spellings accepted in parameter declarations
PARAM_TYPE_ALIASES: dict[str, ParamType] = {
    "integer": ParamType.INT,
    "boolean": ParamType.BOOL,
    "double": ParamType.FLOAT,
}


def normalize_param_type(tag: str) -> ParamType:
    """Resolve a declared type tag to its ParamType.

    Args:
        tag: The tag as declared in a hook's parameters.

    Returns:
        The matching ParamType, or ParamType.MIXED for unknown tags.
    """
    if isinstance(tag, ParamType):
        return tag
    if tag in PARAM_TYPE_ALIASES:
        return PARAM_TYPE_ALIASES[tag]
    try:
        return ParamType(tag)
    except ValueError:
        return ParamType.MIXED


def get_all_param_types() -> list[str]:
    """Get every canonical type tag."""
    return [param_type.value for param_type in ParamType]


def is_checked_param_type(tag: str) -> bool:
    """Check whether a tag performs a runtime type check."""
    return normalize_param_type(tag) is not ParamType.MIXED
