# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Split a declaration line into classified lexemes."""

import logging
from enum import Enum, auto

from declcheck import patterns
from declcheck.model import Lexeme, LexemeCategory
from declcheck.type_registry import is_primitive

logger = logging.getLogger(__name__)

TERMINATOR = ";"
ASSIGNMENT = "="


class TokenizerState(Enum):
    """Scan state of the per-line tokenizer.

    ``AFTER_TYPE`` holds for exactly one token after a data type was emitted;
    in that state a valid identifier is always an Identifier, even when it
    spells a type name.
    """

    START = auto()
    AFTER_TYPE = auto()
    DEFAULT = auto()


def tokenize(line: str) -> list[Lexeme]:
    """Tokenize one source line.

    Args:
        line: Line text; surrounding whitespace is ignored.

    Returns:
        Lexemes in source order. A token ending in terminators yields an extra
        ``Delimiter`` lexeme right after it.
    """
    lexemes: list[Lexeme] = []
    state = TokenizerState.START
    for match in patterns.RAW_TOKEN.finditer(line):
        raw = match.group(0)
        body = raw.rstrip(TERMINATOR)
        terminators = raw[len(body) :]
        if body:
            category = classify(body, state)
            lexemes.append(Lexeme(text=body, category=category))
            state = next_state(category)
        else:
            state = next_state("Delimiter")
        if terminators:
            lexemes.append(Lexeme(text=terminators, category="Delimiter"))
    return lexemes


def classify(token: str, state: TokenizerState) -> LexemeCategory:
    """Classify a terminator-free token in the given state.

    Args:
        token: Token text without trailing terminators.
        state: Current tokenizer state.

    Returns:
        Lexeme category for the token.
    """
    if state is TokenizerState.AFTER_TYPE and patterns.is_identifier(token):
        return "Identifier"
    if is_primitive(token):
        return "DataType"
    if token == ASSIGNMENT:
        return "AssignmentOperator"
    if patterns.INT_LITERAL.match(token) or patterns.is_float_literal(token):
        return "Value"
    if patterns.STRING_LITERAL.match(token) or patterns.CHAR_LITERAL.match(token):
        return "Value"
    if patterns.is_identifier(token):
        return "Identifier"
    logger.debug(f"Unrecognized token (token={token})")
    return "Unknown"


def next_state(category: LexemeCategory) -> TokenizerState:
    """Return the state that follows a token of ``category``."""
    if category == "DataType":
        return TokenizerState.AFTER_TYPE
    return TokenizerState.DEFAULT
