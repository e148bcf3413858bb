# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Gated stage sequencing: each stage runs only after the previous passed."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from declcheck.analyzer import Analyzer
from declcheck.analyzers import LexicalAnalyzer, SemanticAnalyzer, SyntaxValidator
from declcheck.model import AnalysisResult, Stage

logger = logging.getLogger(__name__)

STAGE_ORDER: tuple[Stage, ...] = ("lexical", "syntax", "semantic")


@dataclass(frozen=True)
class PipelineResult:
    """Represent one gated run.

    Attributes:
        results: Results of the stages that ran, in order.
        skipped: Requested stages that never ran because an earlier one failed.
    """

    results: list[AnalysisResult]
    skipped: list[Stage]

    @property
    def passed(self) -> bool:
        return not self.skipped and all(result.passed for result in self.results)

    @property
    def failed_stage(self) -> Stage | None:
        for result in self.results:
            if not result.passed:
                return result.stage
        return None


def build_analyzer(
    stage: Stage, strip_comments: bool = True, strict: bool = False
) -> Analyzer:
    """Create the analyzer for one stage.

    Args:
        stage: Stage name.
        strip_comments: Remove comments before analysis.
        strict: Strict declaration policy (semantic stage only).

    Returns:
        A fresh analyzer instance.

    Raises:
        ValueError: If ``stage`` is unknown.
    """
    if stage == "lexical":
        return LexicalAnalyzer(strip_comments=strip_comments)
    if stage == "syntax":
        return SyntaxValidator(strip_comments=strip_comments)
    if stage == "semantic":
        return SemanticAnalyzer(strip_comments=strip_comments, strict=strict)
    raise ValueError(f"Unsupported stage: {stage}")


def run_pipeline(
    source: str,
    stages: Sequence[Stage] = STAGE_ORDER,
    strip_comments: bool = True,
    strict: bool = False,
) -> PipelineResult:
    """Run stages in order, stopping after the first failure.

    Args:
        source: Decoded source text.
        stages: Stages to run; each must appear at most once.
        strip_comments: Remove comments before analysis.
        strict: Strict declaration policy for the semantic stage.

    Returns:
        Results of executed stages and the names of skipped ones.

    Raises:
        ValueError: If a stage is unknown or repeated.
    """
    if len(set(stages)) != len(stages):
        raise ValueError("stages must not repeat")
    ordered = list(stages)
    results: list[AnalysisResult] = []
    for position, stage in enumerate(ordered):
        analyzer = build_analyzer(stage, strip_comments=strip_comments, strict=strict)
        result = analyzer.analyze(source)
        results.append(result)
        logger.info(
            f"Stage completed (stage={stage} passed={result.passed} "
            f"diagnostics={len(result.diagnostics)})"
        )
        if not result.passed:
            skipped = ordered[position + 1 :]
            if skipped:
                logger.info(f"Stopping after failed stage (stage={stage} skipped={skipped})")
            return PipelineResult(results=results, skipped=skipped)
    return PipelineResult(results=results, skipped=[])
