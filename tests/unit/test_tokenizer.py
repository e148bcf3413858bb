# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later

import pytest

from declcheck.model import Lexeme
from declcheck.tokenizer import TokenizerState, classify, next_state, tokenize


def _pairs(line: str) -> list[tuple[str, str]]:
    return [(lexeme.text, lexeme.category) for lexeme in tokenize(line)]


def test_tok_001_full_declaration_yields_five_lexemes() -> None:
    assert tokenize("int a = 5;") == [
        Lexeme(text="int", category="DataType"),
        Lexeme(text="a", category="Identifier"),
        Lexeme(text="=", category="AssignmentOperator"),
        Lexeme(text="5", category="Value"),
        Lexeme(text=";", category="Delimiter"),
    ]


def test_tok_002_decimal_and_signed_values() -> None:
    assert _pairs("double b = -2.5;")[3] == ("-2.5", "Value")
    assert _pairs("double c = 1.5e10;")[3] == ("1.5e10", "Value")
    assert _pairs("long d = +42;")[3] == ("+42", "Value")


def test_tok_003_boolean_literal_classifies_as_identifier() -> None:
    assert _pairs("boolean c = true;")[3] == ("true", "Identifier")


def test_tok_004_quoted_string_with_spaces_is_one_value() -> None:
    assert _pairs('String s = "hello world";') == [
        ("String", "DataType"),
        ("s", "Identifier"),
        ("=", "AssignmentOperator"),
        ('"hello world"', "Value"),
        (";", "Delimiter"),
    ]


def test_tok_005_char_literal_is_value() -> None:
    assert _pairs("char c = 'x';")[3] == ("'x'", "Value")


def test_tok_006_identifier_after_type_wins_over_type_name() -> None:
    assert _pairs("int int;") == [
        ("int", "DataType"),
        ("int", "Identifier"),
        (";", "Delimiter"),
    ]


def test_tok_007_type_name_outside_after_type_state_is_datatype() -> None:
    assert _pairs("int x int") == [
        ("int", "DataType"),
        ("x", "Identifier"),
        ("int", "DataType"),
    ]


def test_tok_008_delimiter_only_token_consumes_after_type_state() -> None:
    assert _pairs("int ; int") == [
        ("int", "DataType"),
        (";", "Delimiter"),
        ("int", "DataType"),
    ]


def test_tok_009_invalid_token_after_type_falls_through_to_unknown() -> None:
    assert _pairs("int 5x;") == [
        ("int", "DataType"),
        ("5x", "Unknown"),
        (";", "Delimiter"),
    ]


def test_tok_010_repeated_terminators_form_one_delimiter() -> None:
    assert _pairs("x;;") == [("x", "Identifier"), (";;", "Delimiter")]


def test_tok_011_unknown_tokens_are_still_counted() -> None:
    assert len(tokenize("int a = @#;")) == 5
    assert _pairs("int a = @#;")[3] == ("@#", "Unknown")


def test_tok_012_blank_line_has_no_lexemes() -> None:
    assert tokenize("   ") == []


@pytest.mark.parametrize(
    ("token", "state", "expected"),
    [
        ("int", TokenizerState.START, "DataType"),
        ("int", TokenizerState.AFTER_TYPE, "Identifier"),
        ("int", TokenizerState.DEFAULT, "DataType"),
        ("=", TokenizerState.AFTER_TYPE, "AssignmentOperator"),
        ("7", TokenizerState.AFTER_TYPE, "Value"),
        ("name", TokenizerState.DEFAULT, "Identifier"),
        ("a.b", TokenizerState.DEFAULT, "Unknown"),
    ],
)
def test_tok_013_classify_per_state(
    token: str, state: TokenizerState, expected: str
) -> None:
    assert classify(token, state) == expected


def test_tok_014_transitions() -> None:
    assert next_state("DataType") is TokenizerState.AFTER_TYPE
    assert next_state("Identifier") is TokenizerState.DEFAULT
    assert next_state("Delimiter") is TokenizerState.DEFAULT
    assert next_state("Unknown") is TokenizerState.DEFAULT
