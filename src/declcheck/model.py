# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for analysis runs."""

from dataclasses import dataclass, field
from typing import Literal

Stage = Literal["lexical", "syntax", "semantic"]
DiagnosticKind = Literal["structural", "grammar", "semantic"]
LexemeCategory = Literal[
    "DataType",
    "Identifier",
    "AssignmentOperator",
    "Delimiter",
    "Value",
    "Unknown",
]


@dataclass(frozen=True)
class SourceLine:
    """Represent one physical line of the analyzed source.

    Attributes:
        number: Line number (1-based), counted before blank lines are skipped.
        raw: Line text as split from the source.
        text: Trimmed line text.
    """

    number: int
    raw: str
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class Lexeme:
    """Represent one classified token."""

    text: str
    category: LexemeCategory

    def __str__(self) -> str:
        return f"{self.text} [{self.category}]"


@dataclass(frozen=True)
class TokenizedLine:
    """Represent the lexemes produced for one declaration line."""

    line_number: int
    lexemes: list[Lexeme]

    @property
    def token_count(self) -> int:
        return len(self.lexemes)

    @property
    def annotation(self) -> str:
        """Render the line as ``Line <n>: <lexeme> [<Category>], ...``."""
        rendered = ", ".join(str(lexeme) for lexeme in self.lexemes)
        return f"Line {self.line_number}: {rendered}"


@dataclass(frozen=True)
class Declaration:
    """Represent one declarator accepted by an analysis stage.

    Attributes:
        type_name: Declared type name.
        name: Declarator name with any array suffix removed.
        initializer: Raw initializer text; ``None`` when no ``=`` is present.
        line_number: Source line number (1-based).
    """

    type_name: str
    name: str
    initializer: str | None
    line_number: int


@dataclass(frozen=True)
class Diagnostic:
    """Represent one error found during analysis.

    Attributes:
        line: Source line number, or ``None`` for a top-level diagnostic.
        message: Message text without the ``Line <n>:`` prefix.
        kind: Error family (structural, grammar or semantic).
        hint: Optional suggestion; never affects pass/fail.
    """

    line: int | None
    message: str
    kind: DiagnosticKind
    hint: str | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"


@dataclass(frozen=True)
class AnalysisResult:
    """Represent the outcome of one analyzer run.

    Attributes:
        stage: Stage that produced the result.
        passed: ``True`` when no diagnostics were produced.
        diagnostics: Diagnostics in discovery order.
        token_count: Total lexeme count (lexical stage only).
        lines: Per-line lexemes (lexical stage only).
        declarations: Accepted declarations (syntax and semantic stages).
        symbol_table: Identifier to declared type, insertion ordered
            (semantic stage only).
    """

    stage: Stage
    passed: bool
    diagnostics: list[Diagnostic]
    token_count: int = 0
    lines: list[TokenizedLine] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)
    symbol_table: dict[str, str] = field(default_factory=dict)

    @property
    def annotations(self) -> list[str]:
        return [line.annotation for line in self.lines]

    @property
    def messages(self) -> list[str]:
        return [str(diagnostic) for diagnostic in self.diagnostics]
