# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Recognized primitive type names and their numeric classification."""

from typing import Literal

PrimitiveType = Literal[
    "int", "double", "float", "boolean", "char", "long", "byte", "short", "String"
]

# Declaration order is kept for suggestions and stable output.
PRIMITIVE_TYPES: tuple[str, ...] = (
    "int",
    "double",
    "float",
    "boolean",
    "char",
    "long",
    "byte",
    "short",
    "String",
)

STRING_TYPE = "String"
CHAR_TYPE = "char"
BOOLEAN_TYPE = "boolean"

_PRIMITIVE_SET: frozenset[str] = frozenset(PRIMITIVE_TYPES)
_INTEGRAL_TYPES: frozenset[str] = frozenset({"int", "long", "byte", "short", "char"})
_FLOATING_TYPES: frozenset[str] = frozenset({"double", "float"})

# Inferred category of an initializer expression.
TypeCategory = Literal["string", "floating", "integral", "boolean", "unknown"]


def is_primitive(name: str) -> bool:
    """Return whether ``name`` is one of the recognized primitive types."""
    return name in _PRIMITIVE_SET


def is_integral(name: str) -> bool:
    """Return whether ``name`` is an integer-width type (``char`` included)."""
    return name in _INTEGRAL_TYPES


def is_floating(name: str) -> bool:
    """Return whether ``name`` is a floating point type."""
    return name in _FLOATING_TYPES


def is_numeric(name: str) -> bool:
    """Return whether ``name`` is integral or floating."""
    return is_integral(name) or is_floating(name)


def category_of(name: str) -> TypeCategory:
    """Map a declared type name to its inference category.

    Args:
        name: Declared type name.

    Returns:
        The category the type contributes to expression inference, or
        ``"unknown"`` for non-primitive names.
    """
    if name == STRING_TYPE:
        return "string"
    if is_floating(name):
        return "floating"
    if is_integral(name):
        return "integral"
    if name == BOOLEAN_TYPE:
        return "boolean"
    return "unknown"
