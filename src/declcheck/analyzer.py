# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analyzer interface and helpers shared by the analysis stages."""

from typing import Protocol

from declcheck.model import AnalysisResult, Diagnostic, SourceLine, Stage
from declcheck.normalizer import strip_comments

NO_SOURCE_MESSAGE = "No source code provided"
NO_DECLARATIONS_MESSAGE = "No variable declarations found"


class Analyzer(Protocol):
    """Stage-agnostic analyzer contract."""

    stage: Stage

    def analyze(self, source: str) -> AnalysisResult:
        """Analyze a source snippet and return a fresh result.

        Args:
            source: Decoded source text.

        Returns:
            Result for this call only; no state carries over between calls.
        """


def split_source_lines(source: str, strip: bool = True) -> list[SourceLine]:
    """Split source text into numbered lines.

    Args:
        source: Decoded source text.
        strip: Whether to remove comments before splitting.

    Returns:
        All lines, blank ones included, numbered from 1.
    """
    text = strip_comments(source) if strip else source
    return [
        SourceLine(number=number, raw=raw, text=raw.strip())
        for number, raw in enumerate(text.split("\n"), start=1)
    ]


def is_empty_source(source: str) -> bool:
    return not source or not source.strip()


def empty_source_result(stage: Stage) -> AnalysisResult:
    """Build the failing result returned for empty or whitespace-only input."""
    return AnalysisResult(
        stage=stage,
        passed=False,
        diagnostics=[
            Diagnostic(line=None, message=NO_SOURCE_MESSAGE, kind="structural")
        ],
    )
