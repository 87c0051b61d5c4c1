"""Investor/opportunity matchmaking."""

from .engine import RISK_MATRIX, MatchEngine, match_risk_tolerance

__all__ = ["MatchEngine", "RISK_MATRIX", "match_risk_tolerance"]
