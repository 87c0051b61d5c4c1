"""Entrepreneur reliability scoring."""

from .scorer import ReliabilityScorer, normalize_metrics, numerical_score

__all__ = ["ReliabilityScorer", "normalize_metrics", "numerical_score"]
