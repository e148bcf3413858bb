# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Load declaration snippets from files and directories."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES: tuple[str, ...] = (".java",)


class SourceLoadError(RuntimeError):
    """Represent a source file that cannot be located, read or decoded."""


@dataclass(frozen=True)
class SourceFile:
    """Represent one decoded source.

    Attributes:
        path: Path as given or discovered.
        text: Decoded file content.
    """

    path: Path
    text: str


class IgnoreMatcher:
    """Match root-relative paths against every .gitignore beneath a root.

    Each .gitignore is compiled on its own and applied to paths below the
    directory that holds it.
    """

    def __init__(self, specs: dict[str, pathspec.GitIgnoreSpec]) -> None:
        """Initialize matcher.

        Args:
            specs: Compiled matchers keyed by root-relative directory
                (``""`` for the root itself).
        """
        self._specs = specs

    @classmethod
    def from_root(cls, root: Path) -> "IgnoreMatcher":
        """Compile every .gitignore found beneath ``root``.

        Args:
            root: Directory being scanned.

        Returns:
            Configured ignore matcher; empty when no .gitignore exists.

        Raises:
            SourceLoadError: If a .gitignore file cannot be read.
        """
        specs: dict[str, pathspec.GitIgnoreSpec] = {}
        for ignore_path in sorted(root.rglob(".gitignore")):
            base = ignore_path.parent.relative_to(root).as_posix()
            try:
                lines = ignore_path.read_text(encoding="utf-8").splitlines()
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceLoadError(f"Failed to read {ignore_path}: {exc}") from exc
            specs["" if base == "." else base] = pathspec.GitIgnoreSpec.from_lines(lines)
        logger.debug(f"Loaded ignore files (root={root} count={len(specs)})")
        return cls(specs=specs)

    def matches(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether a path should be ignored.

        Args:
            relative_path: Root-relative POSIX path.
            is_dir: Whether the path is a directory.

        Returns:
            True when any applicable .gitignore ignores the path.
        """
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        for base, spec in self._specs.items():
            if not base:
                local = normalized
            elif normalized.startswith(f"{base}/"):
                local = normalized[len(base) + 1 :]
            else:
                continue
            if spec.match_file(f"{local}/" if is_dir else local):
                return True
        return False


def load_source(path: Path) -> SourceFile:
    """Read one UTF-8 source file.

    Args:
        path: File path.

    Returns:
        The decoded source.

    Raises:
        SourceLoadError: If the file is missing, unreadable or not UTF-8.
    """
    if not path.is_file():
        raise SourceLoadError(f"Source file does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed reading source (path={path} error={exc})")
        raise SourceLoadError(f"Failed to read {path}: {exc}") from exc
    return SourceFile(path=path, text=text)


def discover_sources(
    root: Path, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
) -> list[SourceFile]:
    """Load every matching file beneath a directory.

    The ``.git`` directory and paths ignored by .gitignore files are skipped.

    Args:
        root: Directory to walk.
        suffixes: File suffixes to include.

    Returns:
        Sources sorted by path.

    Raises:
        SourceLoadError: If the root is not a directory or a file cannot be read.
    """
    if not root.is_dir():
        raise SourceLoadError(f"Source directory does not exist: {root}")
    matcher = IgnoreMatcher.from_root(root)
    sources: list[SourceFile] = []
    skipped = 0
    queue: list[Path] = [root]
    while queue:
        current = queue.pop(0)
        for child in sorted(current.iterdir(), key=lambda item: item.name):
            if child.name == ".git" and child.is_dir():
                continue
            relative = child.relative_to(root).as_posix()
            if matcher.matches(relative_path=relative, is_dir=child.is_dir()):
                skipped += 1
                continue
            if child.is_dir():
                queue.append(child)
            elif child.suffix in suffixes:
                sources.append(load_source(child))
    logger.info(
        f"Source discovery completed (root={root} files={len(sources)} ignored={skipped})"
    )
    return sorted(sources, key=lambda source: source.path)


def load_sources(path: Path, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> list[SourceFile]:
    """Load a single file, or every matching file beneath a directory."""
    if path.is_dir():
        return discover_sources(path, suffixes=suffixes)
    return [load_source(path)]
