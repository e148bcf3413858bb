# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line front end for the declaration analysis stages."""

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TextIO, cast

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table

from declcheck.model import AnalysisResult, Stage
from declcheck.pipeline import STAGE_ORDER, build_analyzer, run_pipeline
from declcheck.report import format_report
from declcheck.sources import DEFAULT_SUFFIXES, SourceFile, SourceLoadError, load_sources

logger = logging.getLogger(__name__)

TABLE_COLUMNS: tuple[str, ...] = ("stage", "status", "line", "kind", "message", "hint")
TABLE_COLUMN_RATIOS: dict[str, int] = {
    "message": 3,
    "hint": 1,
}

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class FileOutcome:
    """Represent the analysis outcome for one source file.

    Attributes:
        path: Source file path.
        results: Results of the stages that ran.
        skipped: Stages not run because an earlier stage failed.
    """

    path: str
    results: list[AnalysisResult]
    skipped: list[Stage]

    @property
    def passed(self) -> bool:
        return not self.skipped and all(result.passed for result in self.results)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--path", required=True, help="Source file or directory to analyze."
    )
    common.add_argument(
        "--format",
        choices=("table", "json", "text"),
        default="table",
        help="Output format.",
    )
    common.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    common.add_argument(
        "--keep-comments",
        action="store_true",
        help="Analyze the source without removing comments.",
    )
    common.add_argument(
        "--suffix",
        action="append",
        default=None,
        help="File suffix to include when --path is a directory (repeatable).",
    )
    common.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )

    parser = argparse.ArgumentParser(prog="declcheck")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("lexical", parents=[common], help="Run the lexical stage.")
    subparsers.add_parser("syntax", parents=[common], help="Run the syntax stage.")
    semantic_parser = subparsers.add_parser(
        "semantic", parents=[common], help="Run the semantic stage."
    )
    check_parser = subparsers.add_parser(
        "check", parents=[common], help="Run all stages, stopping at the first failure."
    )
    for stage_parser in (semantic_parser, check_parser):
        stage_parser.add_argument(
            "--strict",
            action="store_true",
            help="Report non-declaration lines in the semantic stage.",
        )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 when every analysis passed, 1 when any failed, 2 on
        usage or input errors.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return EXIT_USAGE
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    root_path = Path(args.path)
    if not root_path.exists():
        logger.warning(f"Path does not exist (path={root_path})")
        stderr.write(f"Path does not exist: {root_path}\n")
        return EXIT_USAGE

    suffixes = tuple(args.suffix) if args.suffix else DEFAULT_SUFFIXES
    try:
        sources = load_sources(root_path, suffixes=suffixes)
    except SourceLoadError as exc:
        logger.warning(f"Failed to load sources (path={root_path} error={exc})")
        stderr.write(f"{exc}\n")
        return EXIT_USAGE
    if not sources:
        logger.warning(f"No source files found (path={root_path} suffixes={suffixes})")
        stderr.write(f"No source files found under: {root_path}\n")
        return EXIT_USAGE

    outcomes = [_analyze_source(args=args, source=source) for source in sources]
    failed = sum(1 for outcome in outcomes if not outcome.passed)
    logger.info(
        f"Analysis completed (command={args.command} files={len(outcomes)} failed={failed})"
    )

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(outcomes=outcomes, output_path=Path(args.output))
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return EXIT_USAGE
        else:
            _write_json(outcomes=outcomes, stdout=stdout)
    elif args.format == "text":
        _write_text(outcomes=outcomes, stdout=stdout)
    else:
        _write_table(outcomes=outcomes, stdout=stdout)
    return EXIT_FAILED if failed else EXIT_PASSED


def _analyze_source(args: argparse.Namespace, source: SourceFile) -> FileOutcome:
    """Run the requested command on one source.

    Args:
        args: Parsed CLI arguments.
        source: Loaded source file.

    Returns:
        Outcome for the file.
    """
    strip_comments = not args.keep_comments
    strict = bool(getattr(args, "strict", False))
    if args.command == "check":
        pipeline_result = run_pipeline(
            source.text,
            stages=STAGE_ORDER,
            strip_comments=strip_comments,
            strict=strict,
        )
        return FileOutcome(
            path=str(source.path),
            results=pipeline_result.results,
            skipped=pipeline_result.skipped,
        )
    analyzer = build_analyzer(
        cast(Stage, args.command), strip_comments=strip_comments, strict=strict
    )
    return FileOutcome(
        path=str(source.path), results=[analyzer.analyze(source.text)], skipped=[]
    )


def _build_payload(outcomes: list[FileOutcome]) -> dict[str, object]:
    return {
        "passed": all(outcome.passed for outcome in outcomes),
        "files": [
            {
                "path": outcome.path,
                "passed": outcome.passed,
                "skipped": list(outcome.skipped),
                "results": [asdict(result) for result in outcome.results],
            }
            for outcome in outcomes
        ],
    }


def _write_json(outcomes: list[FileOutcome], stdout: TextIO) -> None:
    """Write outcomes in JSON format.

    Args:
        outcomes: Per-file outcomes.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(_build_payload(outcomes), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(outcomes: list[FileOutcome], output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Args:
        outcomes: Per-file outcomes.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(_build_payload(outcomes), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def _write_text(outcomes: list[FileOutcome], stdout: TextIO) -> None:
    """Write historical plain-text reports, one block per file."""
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for outcome in outcomes:
        console.rule(outcome.path, style=Style(color="cyan"), characters="-")
        for result in outcome.results:
            console.print(
                format_report(result, include_details=True),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        if outcome.skipped:
            skipped = ", ".join(stage.upper() for stage in outcome.skipped)
            console.print(f"Skipped: {skipped}", markup=False, highlight=False)


def _write_table(outcomes: list[FileOutcome], stdout: TextIO) -> None:
    """Write diagnostics as one table per file.

    Args:
        outcomes: Per-file outcomes.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for outcome in outcomes:
        console.rule(outcome.path, style=Style(color="cyan"), characters="-")
        table = Table(show_header=True, show_lines=True, expand=True)
        for column in TABLE_COLUMNS:
            table.add_column(
                column,
                ratio=TABLE_COLUMN_RATIOS.get(column),
                overflow="fold",
                justify="right" if column == "line" else "left",
            )
        for result in outcome.results:
            status = "PASSED" if result.passed else "FAILED"
            if result.passed:
                table.add_row(result.stage, status, "", "", _summary(result), "")
                continue
            for diagnostic in result.diagnostics:
                table.add_row(
                    result.stage,
                    status,
                    "" if diagnostic.line is None else str(diagnostic.line),
                    diagnostic.kind,
                    diagnostic.message,
                    diagnostic.hint or "",
                )
        for stage in outcome.skipped:
            table.add_row(stage, "SKIPPED", "", "", "", "")
        console.print(table)


def _summary(result: AnalysisResult) -> str:
    if result.stage == "lexical":
        return f"tokens={result.token_count} lines={len(result.lines)}"
    if result.stage == "semantic":
        return f"symbols={len(result.symbol_table)}"
    return f"declarations={len(result.declarations)}"


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
