"""Opportunity risk assessment.

Two independent sub-assessments:
1. Text risk (baseline 50): keyword tiers over the description
2. Structural risk (baseline 30): funding goal, industry, reliability, stage

combined = text * 0.4 + structural * 0.6 (weights configurable)
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.weights import DEFAULT_WEIGHTS, ScoringWeights
from ..errors import ComputationFailure
from ..lifecycle import ModelLifecycle
from ..models import AnalysisMode, FundingStage, OpportunityFeatures, RiskLevel, RiskResult, to_score
from .keywords import (
    HIGH_VOLATILITY_INDUSTRIES,
    LOW_VOLATILITY_INDUSTRIES,
    RISK_KEYWORDS,
    TIER_DELTAS,
    TIER_READINGS,
)

logger = logging.getLogger(__name__)

TEXT_BASELINE = 50
STRUCTURAL_BASELINE = 30
SHORT_DESCRIPTION_CHARS = 200
HIGH_FUNDING_GOAL = 100_000
LOW_FUNDING_GOAL = 5_000

UNAVAILABLE_FACTOR = "Risk analysis unavailable - treat as medium risk until reviewed"

# Output order of the risk network's softmax head
NETWORK_LEVELS = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)


@dataclass
class PartialRisk:
    """Score and explanations from one sub-assessment."""

    score: float
    factors: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


def analyze_description_risk(description: str) -> PartialRisk:
    """Score description wording. Each keyword counts once."""
    description = description or ""
    lower = description.lower()
    risk = PartialRisk(score=TEXT_BASELINE)

    for tier, keywords in RISK_KEYWORDS.items():
        for keyword in keywords:
            if keyword in lower:
                risk.score += TIER_DELTAS[tier]
                risk.factors.append(TIER_READINGS[tier].format(keyword=keyword))

    if risk.score > 70:
        risk.suggestions.append("Consider providing more evidence of market validation")
        risk.suggestions.append("Include details about risk mitigation strategies")

    if len(description) < SHORT_DESCRIPTION_CHARS:
        risk.suggestions.append("Provide more detailed business description")
        risk.score += 5

    risk.score = max(0, min(100, risk.score))
    return risk


def analyze_structural_risk(opportunity: OpportunityFeatures) -> PartialRisk:
    risk = PartialRisk(score=STRUCTURAL_BASELINE)

    if opportunity.funding_goal > HIGH_FUNDING_GOAL:
        risk.score += 20
        risk.factors.append("High funding goal increases execution risk")
        risk.suggestions.append("Consider phased funding approach")
    elif opportunity.funding_goal < LOW_FUNDING_GOAL:
        risk.score += 10
        risk.factors.append("Very low funding goal may indicate limited scope")

    industry = opportunity.industry.lower()
    if any(name in industry for name in HIGH_VOLATILITY_INDUSTRIES):
        risk.score += 15
        risk.factors.append("Industry has higher volatility and competition")
    elif any(name in industry for name in LOW_VOLATILITY_INDUSTRIES):
        risk.score -= 10
        risk.factors.append("Industry has established market patterns")

    if opportunity.entrepreneur_reliability_score < 60:
        risk.score += 20
        risk.factors.append("Entrepreneur reliability score indicates execution risk")
        risk.suggestions.append("Request detailed milestone plan and progress tracking")
    elif opportunity.entrepreneur_reliability_score > 80:
        risk.score -= 15
        risk.factors.append("High entrepreneur reliability reduces execution risk")

    if opportunity.funding_stage is FundingStage.SEED:
        risk.score += 10
        risk.factors.append("Seed stage carries higher uncertainty")
    elif opportunity.funding_stage is FundingStage.GROWTH:
        risk.score -= 5
        risk.factors.append("Growth stage indicates proven business model")

    risk.score = max(0, min(100, risk.score))
    return risk


class RiskAssessor:
    def __init__(
        self,
        lifecycle: Optional[ModelLifecycle] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lifecycle = lifecycle
        self._weights = weights

    def assess(self, opportunity: Union[OpportunityFeatures, Mapping[str, Any]]) -> RiskResult:
        """Assess opportunity risk. Never raises.

        Unvalidated mappings are accepted; ones that fail validation get the
        neutral unavailable result.
        """
        try:
            opportunity = OpportunityFeatures.model_validate(opportunity)
        except ValidationError as exc:
            logger.warning("Risk input rejected: %s", exc)
            return _unavailable()

        try:
            result = self._assess(opportunity)
        except Exception as exc:
            logger.warning(
                "Risk analysis failed for %s, using structural risk only: %s",
                opportunity.id,
                exc,
            )
            result = self._fallback(opportunity)

        logger.info(
            "assess_complete opportunity=%s risk_score=%d level=%s mode=%s",
            opportunity.id,
            result.risk_score,
            result.risk_level.value,
            result.analysis_mode.value,
        )
        return result

    def _assess(self, opportunity: OpportunityFeatures) -> RiskResult:
        text_risk = analyze_description_risk(opportunity.description)
        structural_risk = analyze_structural_risk(opportunity)

        combined = (
            text_risk.score * self._weights.text_risk_blend
            + structural_risk.score * self._weights.structural_risk_blend
        )

        model_level = self._model_level(opportunity, text_risk, structural_risk)

        return RiskResult(
            risk_score=to_score(combined),
            risk_factors=text_risk.factors + structural_risk.factors,
            suggestions=text_risk.suggestions + structural_risk.suggestions,
            analysis_mode=AnalysisMode.MODEL if model_level is not None else AnalysisMode.HEURISTIC,
            model_risk_level=model_level,
        )

    def _model_level(
        self,
        opportunity: OpportunityFeatures,
        text_risk: PartialRisk,
        structural_risk: PartialRisk,
    ) -> Optional[RiskLevel]:
        if self._lifecycle is None:
            return None
        network = self._lifecycle.risk_network
        if network is None:
            return None
        try:
            probabilities = network.predict(risk_features(opportunity, text_risk, structural_risk))
        except ComputationFailure as exc:
            logger.warning("Risk network skipped for %s: %s", opportunity.id, exc)
            return None
        return NETWORK_LEVELS[int(probabilities.argmax())]

    def _fallback(self, opportunity: OpportunityFeatures) -> RiskResult:
        try:
            structural_risk = analyze_structural_risk(opportunity)
        except Exception as exc:
            logger.error("Structural risk analysis failed for %s: %s", opportunity.id, exc)
            return _unavailable()
        return RiskResult(
            risk_score=to_score(structural_risk.score),
            risk_factors=structural_risk.factors,
            suggestions=structural_risk.suggestions,
            analysis_mode=AnalysisMode.FALLBACK,
        )


def _unavailable() -> RiskResult:
    return RiskResult(
        risk_score=TEXT_BASELINE,
        risk_factors=[UNAVAILABLE_FACTOR],
        analysis_mode=AnalysisMode.FALLBACK,
    )


def risk_features(
    opportunity: OpportunityFeatures,
    text_risk: PartialRisk,
    structural_risk: PartialRisk,
) -> list[float]:
    """Six network inputs, each scaled to roughly [0, 1]."""
    industry = opportunity.industry.lower()
    return [
        text_risk.score / 100,
        structural_risk.score / 100,
        min(math.log10(opportunity.funding_goal + 1) / 7, 1.0),
        1.0 if any(name in industry for name in HIGH_VOLATILITY_INDUSTRIES) else 0.0,
        opportunity.entrepreneur_reliability_score / 100,
        1.0 if opportunity.funding_stage is FundingStage.SEED else 0.0,
    ]
