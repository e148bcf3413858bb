# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Semantic stage: symbol table, duplicates, undefined references, type checks."""

import logging

from declcheck import patterns
from declcheck.analyzer import (
    NO_DECLARATIONS_MESSAGE,
    empty_source_result,
    is_empty_source,
    split_source_lines,
)
from declcheck.inference import (
    UndefinedReferenceError,
    infer_category,
    single_literal_kind,
)
from declcheck.model import AnalysisResult, Declaration, Diagnostic, Stage
from declcheck.scanner import index_of_top_level, split_top_level, strip_enclosing_parens
from declcheck.suggestions import DEFAULT_HINT_THRESHOLD, did_you_mean, validate_threshold
from declcheck.type_registry import (
    BOOLEAN_TYPE,
    CHAR_TYPE,
    STRING_TYPE,
    is_floating,
    is_integral,
    is_numeric,
)

logger = logging.getLogger(__name__)

_UNVERIFIABLE_TYPES: frozenset[str] = frozenset({STRING_TYPE, BOOLEAN_TYPE, CHAR_TYPE})


class SemanticAnalyzer:
    """Type-check declarations against a per-run symbol table."""

    stage: Stage = "semantic"

    def __init__(
        self,
        strip_comments: bool = True,
        strict: bool = False,
        hint_threshold: float = DEFAULT_HINT_THRESHOLD,
    ) -> None:
        """Initialize the analyzer.

        Args:
            strip_comments: Remove comments before splitting lines.
            strict: Report lines that are not declarations and require at
                least one declaration. When ``False`` such lines are skipped.
            hint_threshold: Similarity needed for an identifier suggestion.

        Raises:
            ValueError: If ``hint_threshold`` is outside [0.0, 1.0].
        """
        self._strip_comments = strip_comments
        self._strict = strict
        self._hint_threshold = validate_threshold(hint_threshold)

    def analyze(self, source: str) -> AnalysisResult:
        """Run the semantic stage.

        Declaration lines may carry modifiers, ``[]`` after the type, and a
        comma-separated declarator list. A declarator that fails any check is
        reported and not registered.

        Args:
            source: Decoded source text.

        Returns:
            Result with a snapshot of the final symbol table.
        """
        if is_empty_source(source):
            return empty_source_result(self.stage)

        symbols: dict[str, str] = {}
        diagnostics: list[Diagnostic] = []
        declarations: list[Declaration] = []
        matched_lines = 0
        for line in split_source_lines(source, strip=self._strip_comments):
            if line.is_blank:
                continue
            match = patterns.DECLARATION_LINE.match(line.text)
            if match is None:
                if self._strict:
                    diagnostics.append(
                        Diagnostic(
                            line=line.number,
                            message=f"Not a variable declaration: {line.text}",
                            kind="structural",
                        )
                    )
                else:
                    logger.debug(f"Skipping non-declaration line (line={line.number})")
                continue
            matched_lines += 1
            base_type, declarator_list = match.group(1), match.group(2)
            for part in split_top_level(declarator_list, ","):
                declaration, diagnostic = self._check_declarator(
                    base_type=base_type,
                    part=part,
                    line_number=line.number,
                    symbols=symbols,
                )
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
                    continue
                if declaration is not None:
                    symbols[declaration.name] = declaration.type_name
                    declarations.append(declaration)

        if self._strict and matched_lines == 0:
            diagnostics.append(
                Diagnostic(line=None, message=NO_DECLARATIONS_MESSAGE, kind="structural")
            )

        return AnalysisResult(
            stage=self.stage,
            passed=not diagnostics,
            diagnostics=diagnostics,
            declarations=declarations,
            symbol_table=dict(symbols),
        )

    def _check_declarator(
        self,
        base_type: str,
        part: str,
        line_number: int,
        symbols: dict[str, str],
    ) -> tuple[Declaration | None, Diagnostic | None]:
        """Check one ``name [= initializer]`` declarator.

        Args:
            base_type: Type shared by every declarator on the line.
            part: Declarator text.
            line_number: Source line number.
            symbols: Symbols registered so far in this run.

        Returns:
            Either the declaration to register or the diagnostic to report.
        """
        text = part.strip()
        if not text:
            return None, Diagnostic(
                line=line_number, message="Empty declaration part", kind="structural"
            )

        initializer: str | None = None
        eq_index = index_of_top_level(text, "=")
        if eq_index >= 0:
            name = text[:eq_index].strip()
            initializer = text[eq_index + 1 :].strip()
        else:
            name = text
        name = patterns.ARRAY_SUFFIX.sub("", name).strip()

        if not patterns.is_identifier(name):
            return None, Diagnostic(
                line=line_number,
                message=f"Invalid variable name '{name}'",
                kind="grammar",
            )
        if name in symbols:
            return None, Diagnostic(
                line=line_number,
                message=f"Variable '{name}' already declared",
                kind="semantic",
            )

        if initializer:
            diagnostic = self._check_initializer(
                declared_type=base_type,
                expr=initializer,
                name=name,
                line_number=line_number,
                symbols=symbols,
            )
            if diagnostic is not None:
                return None, diagnostic

        return (
            Declaration(
                type_name=base_type,
                name=name,
                initializer=initializer,
                line_number=line_number,
            ),
            None,
        )

    def _check_initializer(
        self,
        declared_type: str,
        expr: str,
        name: str,
        line_number: int,
        symbols: dict[str, str],
    ) -> Diagnostic | None:
        """Check that an initializer is assignable to the declared type.

        Returns:
            A diagnostic on mismatch, undefined reference, or unverifiable
            initializer; ``None`` when the initializer is accepted.
        """
        expr = strip_enclosing_parens(expr.rstrip(";").strip())

        literal = single_literal_kind(expr)
        if literal is not None:
            message = _literal_mismatch(literal, declared_type, name)
        else:
            try:
                category = infer_category(expr, symbols)
            except UndefinedReferenceError as exc:
                return Diagnostic(
                    line=line_number,
                    message=f"Undefined variable '{exc.name}' used in assignment to '{name}'",
                    kind="semantic",
                    hint=did_you_mean(exc.name, symbols, self._hint_threshold),
                )
            message = _expression_mismatch(category, declared_type, name)

        if message is None:
            return None
        return Diagnostic(line=line_number, message=message, kind="semantic")


def _literal_mismatch(literal: str, declared_type: str, name: str) -> str | None:
    """Return the mismatch message for a single-literal initializer, if any."""
    if literal == "string" and declared_type != STRING_TYPE:
        return f"Type mismatch - cannot assign String literal to {declared_type} '{name}'"
    if literal == "char" and declared_type != CHAR_TYPE:
        return f"Type mismatch - cannot assign char literal to {declared_type} '{name}'"
    if literal == "boolean" and declared_type != BOOLEAN_TYPE:
        return f"Type mismatch - cannot assign boolean literal to {declared_type} '{name}'"
    if literal == "integer" and not is_numeric(declared_type):
        return f"Type mismatch - cannot assign integer literal to {declared_type} '{name}'"
    if literal == "floating" and not is_floating(declared_type):
        if is_integral(declared_type):
            return (
                "Type mismatch - cannot assign floating literal to integral type "
                f"{declared_type} '{name}'"
            )
        return f"Type mismatch - cannot assign floating literal to {declared_type} '{name}'"
    return None


def _expression_mismatch(category: str, declared_type: str, name: str) -> str | None:
    """Return the mismatch message for an inferred expression category, if any."""
    if category == "string" and declared_type != STRING_TYPE:
        return (
            f"Type mismatch - expression evaluates to String but variable '{name}' "
            f"is {declared_type}"
        )
    if category == "boolean" and declared_type != BOOLEAN_TYPE:
        return (
            f"Type mismatch - expression evaluates to boolean but variable '{name}' "
            f"is {declared_type}"
        )
    if category == "floating" and not is_floating(declared_type):
        return (
            "Type mismatch - expression evaluates to floating type but variable "
            f"'{name}' is {declared_type}"
        )
    if category == "integral" and not is_numeric(declared_type):
        return (
            "Type mismatch - expression evaluates to integral type but variable "
            f"'{name}' is {declared_type}"
        )
    if category == "unknown" and declared_type in _UNVERIFIABLE_TYPES:
        return f"Unable to verify initializer type for '{name}' declared as {declared_type}"
    return None
