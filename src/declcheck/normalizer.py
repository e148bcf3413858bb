# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment removal that keeps literals and line numbering intact."""

import logging

logger = logging.getLogger(__name__)


def strip_comments(source: str) -> str:
    """Remove line and block comments from declaration source.

    ``//`` comments are dropped up to (not including) the newline. ``/* ... */``
    comments are dropped but every newline inside them is kept, so downstream
    line numbers match the original text. Comment markers inside string or
    character literals are left untouched. A literal never spans lines: an
    unclosed quote ends at the newline.

    Args:
        source: Raw source text.

    Returns:
        Source text without comments and with the same number of lines.
    """
    out: list[str] = []
    quote: str | None = None
    index = 0
    length = len(source)
    removed = 0

    while index < length:
        char = source[index]

        if quote is not None:
            out.append(char)
            if char == "\n":
                quote = None
            elif char == "\\" and index + 1 < length and source[index + 1] != "\n":
                out.append(source[index + 1])
                index += 2
                continue
            elif char == quote:
                quote = None
            index += 1
            continue

        if char in ("'", '"'):
            quote = char
            out.append(char)
            index += 1
            continue

        if char == "/" and index + 1 < length:
            marker = source[index + 1]
            if marker == "/":
                index = _skip_line_comment(source, index + 2)
                removed += 1
                continue
            if marker == "*":
                index = _skip_block_comment(source, index + 2, out)
                removed += 1
                continue

        out.append(char)
        index += 1

    if removed:
        logger.debug(f"Stripped comments (count={removed})")
    return "".join(out)


def _skip_line_comment(source: str, index: int) -> int:
    """Return the index of the newline that ends a ``//`` comment."""
    newline = source.find("\n", index)
    return len(source) if newline < 0 else newline


def _skip_block_comment(source: str, index: int, out: list[str]) -> int:
    """Skip a block comment body, keeping its newlines in ``out``.

    An unterminated block comment runs to the end of the source.
    """
    length = len(source)
    while index < length:
        if source.startswith("*/", index):
            return index + 2
        if source[index] == "\n":
            out.append("\n")
        index += 1
    return length
