"""Decision-scoring engine for an investment marketplace.

Entrepreneur reliability, opportunity risk and investor matchmaking.
"""

from .engine import ScoringEngine, assess_risk, recommend, score_reliability

__all__ = ["ScoringEngine", "assess_risk", "recommend", "score_reliability"]
