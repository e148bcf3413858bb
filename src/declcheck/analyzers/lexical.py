# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Lexical stage: declaration-shaped lines and their lexemes."""

import logging

from declcheck.analyzer import (
    NO_DECLARATIONS_MESSAGE,
    empty_source_result,
    is_empty_source,
    split_source_lines,
)
from declcheck.model import AnalysisResult, Diagnostic, SourceLine, Stage, TokenizedLine
from declcheck.suggestions import DEFAULT_HINT_THRESHOLD, did_you_mean, validate_threshold
from declcheck.tokenizer import tokenize
from declcheck.type_registry import PRIMITIVE_TYPES, is_primitive

logger = logging.getLogger(__name__)


class LexicalAnalyzer:
    """Check that every line is a declaration candidate and tokenize it."""

    stage: Stage = "lexical"

    def __init__(
        self,
        strip_comments: bool = True,
        hint_threshold: float = DEFAULT_HINT_THRESHOLD,
    ) -> None:
        """Initialize the analyzer.

        Args:
            strip_comments: Remove comments before splitting lines.
            hint_threshold: Similarity needed for a type-name suggestion.

        Raises:
            ValueError: If ``hint_threshold`` is outside [0.0, 1.0].
        """
        self._strip_comments = strip_comments
        self._hint_threshold = validate_threshold(hint_threshold)

    def analyze(self, source: str) -> AnalysisResult:
        """Run the lexical stage.

        A line is a declaration candidate when its first whitespace-separated
        token is a primitive type and it contains ``;`` or ``=``. Every other
        non-blank line is reported.

        Args:
            source: Decoded source text.

        Returns:
            Result with total token count and per-line lexemes.
        """
        if is_empty_source(source):
            return empty_source_result(self.stage)

        diagnostics: list[Diagnostic] = []
        tokenized: list[TokenizedLine] = []
        for line in split_source_lines(source, strip=self._strip_comments):
            if line.is_blank:
                continue
            if not is_declaration_candidate(line.text):
                logger.debug(f"Rejected non-declaration line (line={line.number})")
                diagnostics.append(self._reject(line))
                continue
            tokenized.append(
                TokenizedLine(line_number=line.number, lexemes=tokenize(line.text))
            )

        if not tokenized:
            diagnostics.append(
                Diagnostic(line=None, message=NO_DECLARATIONS_MESSAGE, kind="structural")
            )

        return AnalysisResult(
            stage=self.stage,
            passed=not diagnostics,
            diagnostics=diagnostics,
            token_count=sum(line.token_count for line in tokenized),
            lines=tokenized,
        )

    def _reject(self, line: SourceLine) -> Diagnostic:
        first_token = line.text.split()[0]
        return Diagnostic(
            line=line.number,
            message=f"Only variable declarations are allowed. Found: {line.text}",
            kind="structural",
            hint=did_you_mean(first_token, PRIMITIVE_TYPES, self._hint_threshold),
        )


def is_declaration_candidate(text: str) -> bool:
    """Return whether a trimmed line looks like a variable declaration."""
    tokens = text.split()
    if not tokens or not is_primitive(tokens[0]):
        return False
    return ";" in text or "=" in text
