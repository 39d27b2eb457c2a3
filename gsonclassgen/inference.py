from __future__ import annotations

from types import MappingProxyType
from typing import Any

from .naming import sanitize_type_name

# bool is a subclass of int, so the boolean row has to come first.
JAVA_TYPES: tuple[tuple[type, str], ...] = (
    (bool, "boolean"),
    (int, "int"),
    (float, "float"),
    (str, "String"),
    (type(None), "Object"),
)

PRIMITIVE_TYPES = frozenset(java_type for _, java_type in JAVA_TYPES)

BOXED_TYPES = MappingProxyType(
    {
        "boolean": "Boolean",
        "int": "Integer",
        "float": "Float",
    }
)

DEFAULT_VALUES = MappingProxyType(
    {
        "boolean": "false",
        "int": "0",
        "float": "0.0f",
    }
)


class UnresolvableTypeError(ValueError):
    """Raised when a JSON value has no Java type mapping."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.kind = type(value).__name__
        super().__init__(
            f"No type can be determined for JSON key {key!r} (python type: {self.kind})"
        )


def _first_element(values: list) -> Any:
    return values[0] if values else None


def array_depth(value: Any) -> int:
    depth = 0
    current = value
    while isinstance(current, list):
        depth += 1
        current = _first_element(current)
    return depth


def resolve_type(key: str, value: Any) -> str:
    if isinstance(value, dict):
        return sanitize_type_name(key)
    if isinstance(value, list):
        return resolve_type(key, _first_element(value))
    for python_type, java_type in JAVA_TYPES:
        if isinstance(value, python_type):
            return java_type
    raise UnresolvableTypeError(key, value)


def is_custom_type(java_type: str) -> bool:
    return java_type not in PRIMITIVE_TYPES
