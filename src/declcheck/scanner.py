# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Literal and parenthesis aware scanning of declarator lists and initializers."""

import re
from collections.abc import Iterator

_FRAGMENT = re.compile(
    r'"(?:[^"\\]|\\.)*"'
    r"|'(?:[^'\\]|\\.)*'"
    r"|\d+(?:\.\d+)?[eE][+-]?\d+"
    r"|[A-Za-z0-9_.]+"
)


def iter_top_level(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside literals and parentheses.

    Quote characters and parentheses themselves are never yielded. Escapes are
    only honoured inside literals. Unbalanced ``)`` is ignored.

    Args:
        text: Text to scan.

    Yields:
        Index and character of each top-level character.
    """
    quote: str | None = None
    escaped = False
    depth = 0
    for index, char in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in ('"', "'"):
            quote = char
            continue
        if char == "(":
            depth += 1
            continue
        if char == ")":
            depth = max(0, depth - 1)
            continue
        if depth == 0:
            yield index, char


def split_top_level(text: str, separator: str) -> list[str]:
    """Split ``text`` on top-level occurrences of a one-character separator.

    Args:
        text: Text to split.
        separator: Separator character.

    Returns:
        Parts in order. Empty parts are kept, except an empty last part
        after a trailing separator.
    """
    parts: list[str] = []
    start = 0
    for index, char in iter_top_level(text):
        if char == separator:
            parts.append(text[start:index])
            start = index + 1
    if text[start:]:
        parts.append(text[start:])
    return parts


def index_of_top_level(text: str, target: str) -> int:
    """Return the index of the first top-level ``target`` character, or -1."""
    for index, char in iter_top_level(text):
        if char == target:
            return index
    return -1


def strip_enclosing_parens(expr: str) -> str:
    """Remove matching parenthesis pairs that wrap the whole expression.

    ``((a + b))`` becomes ``a + b``; ``(a) + (b)`` is returned unchanged.
    """
    expr = expr.strip()
    while expr.startswith("(") and _matching_paren(expr) == len(expr) - 1:
        expr = expr[1:-1].strip()
    return expr


def expression_fragments(expr: str) -> list[str]:
    """Extract literal and identifier fragments from an initializer.

    Operators, parentheses and other punctuation are dropped.

    Args:
        expr: Initializer expression text.

    Returns:
        Fragments in source order.
    """
    return [match.group(0) for match in _FRAGMENT.finditer(expr)]


def _matching_paren(text: str) -> int:
    """Return the index of the ``)`` closing the ``(`` at index 0, or -1."""
    quote: str | None = None
    escaped = False
    depth = 0
    for index, char in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in ('"', "'"):
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1
