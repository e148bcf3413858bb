# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Closest-name suggestions for diagnostics."""

import logging
from collections.abc import Iterable

import Levenshtein

logger = logging.getLogger(__name__)

DEFAULT_HINT_THRESHOLD: float = 0.6


def validate_threshold(threshold: float) -> float:
    """Check a similarity threshold.

    Args:
        threshold: Inclusive similarity threshold.

    Returns:
        The threshold unchanged.

    Raises:
        ValueError: If threshold is outside [0.0, 1.0].
    """
    if threshold < 0.0 or threshold > 1.0:
        raise ValueError("hint_threshold must be between 0.0 and 1.0.")
    return threshold


def closest_match(
    name: str, candidates: Iterable[str], threshold: float = DEFAULT_HINT_THRESHOLD
) -> str | None:
    """Return the candidate most similar to ``name``.

    Exact matches are not suggestions and are skipped. Ties keep the first
    candidate in iteration order.

    Args:
        name: Misspelled or unknown name.
        candidates: Known names.
        threshold: Minimum ``Levenshtein.ratio`` required.

    Returns:
        The best candidate at or above ``threshold``, or ``None``.
    """
    best: str | None = None
    best_ratio = threshold
    for candidate in candidates:
        if candidate == name:
            continue
        ratio = float(Levenshtein.ratio(name, candidate))
        if ratio >= best_ratio and (best is None or ratio > best_ratio):
            best = candidate
            best_ratio = ratio
    return best


def did_you_mean(
    name: str, candidates: Iterable[str], threshold: float = DEFAULT_HINT_THRESHOLD
) -> str | None:
    """Format a ``did you mean`` hint, or ``None`` when nothing is close."""
    match = closest_match(name=name, candidates=candidates, threshold=threshold)
    if match is None:
        return None
    logger.debug(f"Suggestion found (name={name} suggestion={match})")
    return f"did you mean '{match}'?"
