"""Failure taxonomy for the scoring engine.

These are raised internally only. Every public scoring entry point catches
them and returns its documented fallback value.
"""

from typing import Optional


class ScoringError(Exception):
    """Base class for scoring engine failures."""


class InitializationFailure(ScoringError):
    """A model or embedding resource failed to load. Non-fatal: heuristics take over."""


class ComputationFailure(ScoringError):
    """Unexpected input shape or arithmetic fault within one scoring call."""


class BatchPartialFailure(ScoringError):
    """One item in a batch failed; the item is dropped and the batch continues."""

    def __init__(self, item_id: str, cause: Optional[BaseException] = None) -> None:
        self.item_id = item_id
        self.cause = cause
        super().__init__(f"Item {item_id!r} failed: {cause}")
