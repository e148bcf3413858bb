# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import pytest

from declcheck.analyzers import LexicalAnalyzer
from declcheck.model import Diagnostic

END_TO_END = "int a = 5;\ndouble b = 2.5;\nboolean c = true;"


def test_lex_001_end_to_end_counts_five_lexemes_per_line() -> None:
    result = LexicalAnalyzer().analyze(END_TO_END)

    assert result.passed is True
    assert result.diagnostics == []
    assert result.token_count == 15
    assert result.annotations == [
        "Line 1: int [DataType], a [Identifier], = [AssignmentOperator], 5 [Value], ; [Delimiter]",
        "Line 2: double [DataType], b [Identifier], = [AssignmentOperator], 2.5 [Value], ; [Delimiter]",
        "Line 3: boolean [DataType], c [Identifier], = [AssignmentOperator], true [Identifier], ; [Delimiter]",
    ]


def test_lex_002_non_declaration_line_is_quoted_verbatim() -> None:
    result = LexicalAnalyzer().analyze("  System.out.println(x);  ")

    assert result.passed is False
    assert result.messages == [
        "Line 1: Only variable declarations are allowed. Found: System.out.println(x);",
        "No variable declarations found",
    ]
    assert result.diagnostics[0].kind == "structural"
    assert result.diagnostics[1].line is None


def test_lex_003_every_bad_line_is_reported_and_good_lines_tokenized() -> None:
    source = "int a = 1;\nfoo();\nint b;\nreturn a;"

    result = LexicalAnalyzer().analyze(source)

    assert result.passed is False
    assert [diagnostic.line for diagnostic in result.diagnostics] == [2, 4]
    assert [line.line_number for line in result.lines] == [1, 3]
    assert result.token_count == 8


def test_lex_004_type_without_terminator_or_assignment_is_rejected() -> None:
    result = LexicalAnalyzer().analyze("int x")

    assert result.passed is False
    assert result.messages[0] == "Line 1: Only variable declarations are allowed. Found: int x"


def test_lex_005_misspelled_type_carries_suggestion() -> None:
    result = LexicalAnalyzer().analyze("itn x = 5;")

    assert result.diagnostics[0].hint == "did you mean 'int'?"
    assert result.diagnostics[0].message == (
        "Only variable declarations are allowed. Found: itn x = 5;"
    )


def test_lex_006_comments_are_stripped_and_line_numbers_kept() -> None:
    source = "// header\nint a = 5; // trailing\n/* block\n */\nint b;"

    result = LexicalAnalyzer().analyze(source)

    assert result.passed is True
    assert [line.line_number for line in result.lines] == [2, 5]
    assert result.token_count == 8


def test_lex_007_commented_declaration_is_not_counted() -> None:
    result = LexicalAnalyzer().analyze("// int a;\nint b;")

    assert result.passed is True
    assert [line.line_number for line in result.lines] == [2]


def test_lex_008_keep_comments_reports_comment_lines() -> None:
    result = LexicalAnalyzer(strip_comments=False).analyze("// note\nint a;")

    assert result.passed is False
    assert result.messages == [
        "Line 1: Only variable declarations are allowed. Found: // note"
    ]


@pytest.mark.parametrize("source", ["", "   ", "\n\t\n"])
def test_lex_009_empty_source_yields_single_top_level_diagnostic(source: str) -> None:
    result = LexicalAnalyzer().analyze(source)

    assert result.passed is False
    assert result.diagnostics == [
        Diagnostic(line=None, message="No source code provided", kind="structural")
    ]


def test_lex_010_analyze_is_repeatable_on_one_instance() -> None:
    analyzer = LexicalAnalyzer()

    first = analyzer.analyze("int a = 1;\nfoo();")
    second = analyzer.analyze("int a = 1;\nfoo();")

    assert first == second
    assert first == LexicalAnalyzer().analyze("int a = 1;\nfoo();")


def test_lex_011_unknown_tokens_do_not_fail_the_stage() -> None:
    result = LexicalAnalyzer().analyze("int a = @#;")

    assert result.passed is True
    assert result.token_count == 5
    assert result.lines[0].lexemes[3].category == "Unknown"


def test_lex_012_crlf_lines_are_trimmed() -> None:
    result = LexicalAnalyzer().analyze("int a = 1;\r\nint b = 2;\r\n")

    assert result.passed is True
    assert result.token_count == 10


@pytest.mark.parametrize("threshold", [-0.1, 1.01])
def test_lex_013_out_of_range_hint_threshold_is_rejected(threshold: float) -> None:
    with pytest.raises(ValueError, match="hint_threshold"):
        LexicalAnalyzer(hint_threshold=threshold)
