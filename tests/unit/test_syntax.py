# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import pytest

from declcheck.analyzers import SyntaxValidator
from declcheck.model import Declaration
from declcheck.type_registry import PRIMITIVE_TYPES


def test_syn_001_valid_declarations_are_collected() -> None:
    result = SyntaxValidator().analyze('int a = 5;\n\nString s;\nString t = "x y";')

    assert result.passed is True
    assert result.declarations == [
        Declaration(type_name="int", name="a", initializer="5", line_number=1),
        Declaration(type_name="String", name="s", initializer=None, line_number=3),
        Declaration(type_name="String", name="t", initializer='"x y"', line_number=4),
    ]


@pytest.mark.parametrize("type_name", PRIMITIVE_TYPES)
def test_syn_002_every_primitive_declaration_passes(type_name: str) -> None:
    result = SyntaxValidator().analyze(f"{type_name} value_1;")

    assert result.passed is True
    assert result.diagnostics == []


@pytest.mark.parametrize(
    ("line", "message", "kind"),
    [
        ("int a = 5", "Variable declaration must end with semicolon", "structural"),
        ("int a == 5;", "Invalid operator '==' used instead of '='", "grammar"),
        ("int a = ;", "Assignment value cannot be empty", "structural"),
        ("int;", "Missing type or variable name", "structural"),
        ("System.out.println(x);", "Missing type or variable name", "structural"),
        (
            "final int a;",
            "Too many tokens in declaration part 'final int a'",
            "structural",
        ),
        ("int 1a;", "Invalid variable name '1a'", "grammar"),
        ("int[] arr;", "Invalid or missing type 'int[]'", "grammar"),
    ],
)
def test_syn_003_first_failed_check_is_reported(line: str, message: str, kind: str) -> None:
    result = SyntaxValidator().analyze(line)

    assert result.passed is False
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].message == message
    assert result.diagnostics[0].kind == kind
    assert result.diagnostics[0].line == 1


def test_syn_004_generic_and_custom_types_are_accepted() -> None:
    source = "List<String> names;\nint<x> odd;\nCustomer c = other;"

    result = SyntaxValidator().analyze(source)

    assert result.passed is True
    assert [declaration.type_name for declaration in result.declarations] == [
        "List<String>",
        "int<x>",
        "Customer",
    ]


def test_syn_005_invalid_type_suggests_closest_primitive() -> None:
    result = SyntaxValidator().analyze("int[] arr;")

    assert result.diagnostics[0].hint == "did you mean 'int'?"


def test_syn_006_errors_accumulate_across_lines() -> None:
    source = "int a = 5\nint b = 6;\nint c == 7;"

    result = SyntaxValidator().analyze(source)

    assert result.messages == [
        "Line 1: Variable declaration must end with semicolon",
        "Line 3: Invalid operator '==' used instead of '='",
    ]
    assert [declaration.name for declaration in result.declarations] == ["b"]


def test_syn_007_commented_line_keeps_original_numbering() -> None:
    result = SyntaxValidator().analyze("// int a;\nint b")

    assert result.messages == ["Line 2: Variable declaration must end with semicolon"]


def test_syn_008_empty_source_is_reported() -> None:
    result = SyntaxValidator().analyze(" \n ")

    assert result.passed is False
    assert result.messages == ["No source code provided"]


def test_syn_009_comment_only_source_has_no_declarations() -> None:
    result = SyntaxValidator().analyze("// nothing but a comment\n/* and a block */")

    assert result.passed is False
    assert result.messages == ["No variable declarations found"]
    assert result.diagnostics[0].line is None
    assert result.diagnostics[0].kind == "structural"


def test_syn_010_failed_lines_count_as_declaration_attempts() -> None:
    result = SyntaxValidator().analyze("foo();")

    assert result.messages == ["Line 1: Missing type or variable name"]
