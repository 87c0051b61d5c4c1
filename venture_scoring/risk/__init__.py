"""Opportunity risk assessment."""

from .assessor import RiskAssessor, analyze_description_risk, analyze_structural_risk
from .keywords import HIGH_VOLATILITY_INDUSTRIES, LOW_VOLATILITY_INDUSTRIES, RISK_KEYWORDS

__all__ = [
    "HIGH_VOLATILITY_INDUSTRIES",
    "LOW_VOLATILITY_INDUSTRIES",
    "RISK_KEYWORDS",
    "RiskAssessor",
    "analyze_description_risk",
    "analyze_structural_risk",
]
