# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the declaration front end."""

from declcheck.analyzers import LexicalAnalyzer, SemanticAnalyzer, SyntaxValidator
from declcheck.model import AnalysisResult, Declaration, Diagnostic, Lexeme
from declcheck.normalizer import strip_comments
from declcheck.pipeline import PipelineResult, run_pipeline
from declcheck.report import format_pipeline, format_report
from declcheck.tokenizer import tokenize

__all__ = [
    "AnalysisResult",
    "Declaration",
    "Diagnostic",
    "Lexeme",
    "LexicalAnalyzer",
    "PipelineResult",
    "SemanticAnalyzer",
    "SyntaxValidator",
    "format_pipeline",
    "format_report",
    "run_pipeline",
    "strip_comments",
    "tokenize",
]
