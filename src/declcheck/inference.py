# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Conservative type inference for initializer expressions."""

from collections.abc import Mapping
from typing import Literal

from declcheck import patterns
from declcheck.scanner import expression_fragments
from declcheck.type_registry import TypeCategory, category_of

LiteralKind = Literal["string", "char", "boolean", "integer", "floating"]

# Resolution order when an expression mixes categories.
CATEGORY_PRECEDENCE: tuple[TypeCategory, ...] = (
    "string",
    "floating",
    "integral",
    "boolean",
)


class UndefinedReferenceError(LookupError):
    """Represent an identifier used before it was declared."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def single_literal_kind(expr: str) -> LiteralKind | None:
    """Return the literal kind when the whole expression is one literal.

    Args:
        expr: Initializer with enclosing parentheses already removed.

    Returns:
        The literal kind, or ``None`` when ``expr`` is not a single literal.
    """
    if patterns.STRING_LITERAL.match(expr):
        return "string"
    if patterns.CHAR_LITERAL.match(expr):
        return "char"
    if patterns.BOOLEAN_LITERAL.match(expr):
        return "boolean"
    if patterns.INT_LITERAL.match(expr):
        return "integer"
    if patterns.is_float_literal(expr):
        return "floating"
    return None


def fragment_category(
    fragment: str, symbols: Mapping[str, str]
) -> TypeCategory | None:
    """Classify one expression fragment.

    Character literals count as integral. Fragments that are neither
    literals nor identifiers (``Math.max``, ``5L``) are ignored.

    Args:
        fragment: Literal or identifier text.
        symbols: Identifiers declared so far, mapped to their types.

    Returns:
        The fragment's category, or ``None`` when it carries no type.

    Raises:
        UndefinedReferenceError: If the fragment names an undeclared identifier.
    """
    if patterns.STRING_LITERAL.match(fragment):
        return "string"
    if patterns.CHAR_LITERAL.match(fragment):
        return "integral"
    if patterns.BOOLEAN_LITERAL.match(fragment):
        return "boolean"
    if patterns.INT_LITERAL.match(fragment):
        return "integral"
    if patterns.is_float_literal(fragment):
        return "floating"
    if patterns.is_identifier(fragment):
        if fragment not in symbols:
            raise UndefinedReferenceError(fragment)
        return category_of(symbols[fragment])
    return None


def infer_category(expr: str, symbols: Mapping[str, str]) -> TypeCategory:
    """Infer one category for a compound expression.

    Args:
        expr: Initializer expression.
        symbols: Identifiers declared so far, mapped to their types.

    Returns:
        The highest-precedence category present, or ``"unknown"``.

    Raises:
        UndefinedReferenceError: On the first undeclared identifier.
    """
    found: set[TypeCategory] = set()
    for fragment in expression_fragments(expr):
        category = fragment_category(fragment, symbols)
        if category is not None:
            found.add(category)
    for category in CATEGORY_PRECEDENCE:
        if category in found:
            return category
    return "unknown"
