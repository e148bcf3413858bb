# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Regular expressions shared by the analysis stages."""

import re

from declcheck.type_registry import PRIMITIVE_TYPES

IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
GENERIC_TYPE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*(<[^>]*>)?$")

INT_LITERAL = re.compile(r"^[+-]?\d+$")
FLOAT_LITERAL = re.compile(r"^[+-]?\d+\.\d+([eE][+-]?\d+)?$")
SCI_LITERAL = re.compile(r"^[+-]?\d+(?:\.\d+)?[eE][+-]?\d+$")
CHAR_LITERAL = re.compile(r"^'(?:[^'\\]|\\.)'$")
STRING_LITERAL = re.compile(r'^"(?:[^"\\]|\\.)*"$')
BOOLEAN_LITERAL = re.compile(r"^(true|false)$")

# One raw token: a run of non-whitespace that may embed whole quoted spans.
RAW_TOKEN = re.compile(r'(?:"(?:[^"\\]|\\.)*"|\S)+')

DECLARATION_LINE = re.compile(
    r"^\s*(?:(?:public|private|protected|static|final|transient|volatile)\s+)*"
    r"(" + "|".join(PRIMITIVE_TYPES) + r")(?:\s*\[\s*\])*\s+(.+);\s*$"
)
ARRAY_SUFFIX = re.compile(r"\[\s*\]")


def is_identifier(text: str) -> bool:
    """Return whether ``text`` follows identifier grammar."""
    return IDENTIFIER.match(text) is not None


def is_float_literal(text: str) -> bool:
    """Return whether ``text`` is a decimal or scientific-notation literal."""
    return FLOAT_LITERAL.match(text) is not None or SCI_LITERAL.match(text) is not None
