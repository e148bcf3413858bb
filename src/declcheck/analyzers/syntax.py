# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Syntax stage: strict ``type name [= value];`` grammar per line."""

import logging

from declcheck import patterns
from declcheck.analyzer import (
    NO_DECLARATIONS_MESSAGE,
    empty_source_result,
    is_empty_source,
    split_source_lines,
)
from declcheck.model import (
    AnalysisResult,
    Declaration,
    Diagnostic,
    DiagnosticKind,
    SourceLine,
    Stage,
)
from declcheck.suggestions import DEFAULT_HINT_THRESHOLD, did_you_mean, validate_threshold
from declcheck.type_registry import PRIMITIVE_TYPES, is_primitive

logger = logging.getLogger(__name__)


class _LineError(Exception):
    """Carry the first failed check of one line."""

    def __init__(
        self, message: str, kind: DiagnosticKind, hint: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.hint = hint


class SyntaxValidator:
    """Validate declaration grammar independently of the lexical stage."""

    stage: Stage = "syntax"

    def __init__(
        self,
        strip_comments: bool = True,
        hint_threshold: float = DEFAULT_HINT_THRESHOLD,
    ) -> None:
        """Initialize the validator.

        Args:
            strip_comments: Remove comments before splitting lines.
            hint_threshold: Similarity needed for a type-name suggestion.

        Raises:
            ValueError: If ``hint_threshold`` is outside [0.0, 1.0].
        """
        self._strip_comments = strip_comments
        self._hint_threshold = validate_threshold(hint_threshold)

    def analyze(self, source: str) -> AnalysisResult:
        """Run the syntax stage over every non-blank line.

        Args:
            source: Decoded source text.

        Returns:
            Result with the declarations that passed every check.
        """
        if is_empty_source(source):
            return empty_source_result(self.stage)

        diagnostics: list[Diagnostic] = []
        declarations: list[Declaration] = []
        attempted = 0
        for line in split_source_lines(source, strip=self._strip_comments):
            if line.is_blank:
                continue
            attempted += 1
            try:
                declarations.append(self._check_line(line))
            except _LineError as exc:
                logger.debug(
                    f"Syntax check failed (line={line.number} error={exc.message})"
                )
                diagnostics.append(
                    Diagnostic(
                        line=line.number,
                        message=exc.message,
                        kind=exc.kind,
                        hint=exc.hint,
                    )
                )

        if not attempted:
            diagnostics.append(
                Diagnostic(line=None, message=NO_DECLARATIONS_MESSAGE, kind="structural")
            )

        return AnalysisResult(
            stage=self.stage,
            passed=not diagnostics,
            diagnostics=diagnostics,
            declarations=declarations,
        )

    def _check_line(self, line: SourceLine) -> Declaration:
        """Check one line, stopping at the first failure.

        Args:
            line: Non-blank source line.

        Returns:
            The parsed declaration.

        Raises:
            _LineError: On the first failed check.
        """
        text = line.text
        if not text.endswith(";"):
            raise _LineError("Variable declaration must end with semicolon", "structural")

        body = text[:-1].strip()
        if "==" in body:
            raise _LineError("Invalid operator '==' used instead of '='", "grammar")

        declarator, eq, initializer = body.partition("=")
        declarator = declarator.strip()
        initializer = initializer.strip()
        if eq and not initializer:
            raise _LineError("Assignment value cannot be empty", "structural")

        tokens = declarator.split()
        if len(tokens) < 2:
            raise _LineError("Missing type or variable name", "structural")
        if len(tokens) > 2:
            raise _LineError(
                f"Too many tokens in declaration part '{declarator}'", "structural"
            )

        type_name, name = tokens
        if not patterns.is_identifier(name):
            raise _LineError(f"Invalid variable name '{name}'", "grammar")
        if not is_valid_type(type_name):
            raise _LineError(
                f"Invalid or missing type '{type_name}'",
                "grammar",
                hint=did_you_mean(type_name, PRIMITIVE_TYPES, self._hint_threshold),
            )

        return Declaration(
            type_name=type_name,
            name=name,
            initializer=initializer if eq else None,
            line_number=line.number,
        )


def is_valid_type(type_name: str) -> bool:
    """Return whether a type token is a primitive, generic, or custom type."""
    if is_primitive(type_name):
        return True
    if any(type_name.startswith(f"{primitive}<") for primitive in PRIMITIVE_TYPES):
        return True
    return patterns.GENERIC_TYPE.match(type_name) is not None
