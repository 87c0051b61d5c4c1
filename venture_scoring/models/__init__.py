"""Shared Pydantic value types for the scoring engine."""

from .activity_metrics import ActivityMetrics
from .investor_profile import InvestorProfile
from .match_result import MatchResult, RecommendationSet
from .opportunity import FundingStage, OpportunityFeatures
from .risk_result import RiskLevel, RiskResult
from .score_result import AnalysisMode, ScoreResult, TextSignal, to_score

__all__ = [
    "ActivityMetrics",
    "AnalysisMode",
    "FundingStage",
    "InvestorProfile",
    "MatchResult",
    "OpportunityFeatures",
    "RecommendationSet",
    "RiskLevel",
    "RiskResult",
    "ScoreResult",
    "TextSignal",
    "to_score",
]
