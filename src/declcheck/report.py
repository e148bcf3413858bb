# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plain-text reports in the historical ``<STAGE> ANALYSIS PASSED`` format."""

from declcheck.model import AnalysisResult
from declcheck.pipeline import PipelineResult


def format_report(result: AnalysisResult, include_details: bool = False) -> str:
    """Format one analysis result.

    Args:
        result: Result to render.
        include_details: Add stage extras on success and hints on failure.

    Returns:
        Report text ending with a newline.
    """
    title = f"{result.stage.upper()} ANALYSIS"
    if result.passed:
        lines = [f"{title} PASSED"]
        if include_details:
            lines.extend(_details(result))
        return "\n".join(lines) + "\n"

    lines = [f"{title} FAILED", "", "Errors:"]
    for diagnostic in result.diagnostics:
        lines.append(str(diagnostic))
        if include_details and diagnostic.hint:
            lines.append(f"  hint: {diagnostic.hint}")
    return "\n".join(lines) + "\n"


def format_pipeline(result: PipelineResult, include_details: bool = False) -> str:
    """Format every executed stage of a gated run, then the skipped stages."""
    parts = [format_report(stage, include_details=include_details) for stage in result.results]
    if result.skipped:
        skipped = ", ".join(stage.upper() for stage in result.skipped)
        parts.append(f"Skipped: {skipped}\n")
    return "\n".join(parts)


def _details(result: AnalysisResult) -> list[str]:
    if result.stage == "lexical":
        return ["", f"Total tokens: {result.token_count}", *result.annotations]
    if result.stage == "semantic" and result.symbol_table:
        rows = [f"{name} : {type_name}" for name, type_name in result.symbol_table.items()]
        return ["", "Symbol table:", *rows]
    return []
