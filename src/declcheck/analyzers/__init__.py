# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analysis stages for declaration snippets."""

from declcheck.analyzers.lexical import LexicalAnalyzer
from declcheck.analyzers.semantic import SemanticAnalyzer
from declcheck.analyzers.syntax import SyntaxValidator

__all__ = ["LexicalAnalyzer", "SemanticAnalyzer", "SyntaxValidator"]
