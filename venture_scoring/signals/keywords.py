"""Keyword sets for progress-note sentiment."""

from typing import List

POSITIVE_MARKERS: List[str] = [
    "progress",
    "completed",
    "successful",
    "achieved",
    "improved",
    "excellent",
]

NEGATIVE_MARKERS: List[str] = [
    "delayed",
    "problem",
    "issue",
    "failed",
    "difficult",
    "behind",
]


def count_markers(text_lower: str, markers: List[str]) -> int:
    """Count distinct markers present in already lower-cased text."""
    return sum(1 for marker in markers if marker in text_lower)
