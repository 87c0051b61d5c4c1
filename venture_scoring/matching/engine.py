"""Investor/opportunity match engine.

Scores every opportunity against one investor profile:
1. Industry match (30, or 5 for diversity)
2. Investment amount fit (25 in range, 10 below the investor's minimum)
3. Risk tolerance fit (0-20 from the compatibility matrix)
4. Investment type match (15)
5. Projected ROI (10 above 15%, 5 above 8%)

Only matches scoring above 30 are returned, best first, at most 10.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..errors import BatchPartialFailure
from ..models import (
    InvestorProfile,
    MatchResult,
    OpportunityFeatures,
    RecommendationSet,
    RiskLevel,
)
from ..risk import RiskAssessor

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 30
MAX_RECOMMENDATIONS = 10
DEFAULT_PARALLEL_THRESHOLD = 25
DEFAULT_MAX_WORKERS = 8

# RISK_MATRIX[investor tolerance][opportunity risk level]
RISK_MATRIX: Dict[RiskLevel, Dict[RiskLevel, int]] = {
    RiskLevel.LOW: {RiskLevel.LOW: 20, RiskLevel.MEDIUM: 5, RiskLevel.HIGH: 0},
    RiskLevel.MEDIUM: {RiskLevel.LOW: 15, RiskLevel.MEDIUM: 20, RiskLevel.HIGH: 10},
    RiskLevel.HIGH: {RiskLevel.LOW: 10, RiskLevel.MEDIUM: 15, RiskLevel.HIGH: 20},
}

OpportunityInput = Union[OpportunityFeatures, Mapping[str, Any]]
InvestorInput = Union[InvestorProfile, Mapping[str, Any]]


@dataclass(frozen=True)
class RiskFit:
    score: int
    reason: Optional[str] = None


def match_risk_tolerance(tolerance: RiskLevel, risk_level: RiskLevel) -> RiskFit:
    score = RISK_MATRIX.get(tolerance, {}).get(risk_level, 0)

    if score >= 20:
        reason = "Perfect risk level match"
    elif score >= 10:
        reason = "Acceptable risk level"
    elif score > 0:
        reason = "Risk level outside comfort zone"
    else:
        reason = None

    return RiskFit(score=score, reason=reason)


class MatchEngine:
    def __init__(
        self,
        risk_assessor: Optional[RiskAssessor] = None,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._risk_assessor = risk_assessor or RiskAssessor()
        self._parallel_threshold = parallel_threshold
        self._max_workers = max_workers

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def recommend(
        self, investor: InvestorInput, opportunities: Sequence[OpportunityInput]
    ) -> List[MatchResult]:
        """Ranked recommendations (at most 10). Returns [] on any batch-level failure."""
        return self.recommend_with_report(investor, opportunities).recommended_opportunities

    def recommend_with_report(
        self, investor: InvestorInput, opportunities: Sequence[OpportunityInput]
    ) -> RecommendationSet:
        """Like recommend, also listing opportunities skipped after a failure."""
        try:
            profile = InvestorProfile.model_validate(investor)
            scored, skipped = self._score_all(profile, list(opportunities))
        except Exception as exc:
            logger.error("Recommendation generation failed: %s", exc)
            return RecommendationSet()

        # sorted() is stable: ties keep input order
        ranked = sorted(
            (match for match in scored if match is not None and match.match_score > MIN_MATCH_SCORE),
            key=lambda match: match.match_score,
            reverse=True,
        )
        result = RecommendationSet(
            recommended_opportunities=ranked[:MAX_RECOMMENDATIONS],
            skipped=skipped,
        )
        logger.info(
            "recommend_complete candidates=%d matched=%d returned=%d skipped=%d",
            len(scored),
            len(ranked),
            len(result.recommended_opportunities),
            len(skipped),
        )
        return result

    def match(self, investor: InvestorProfile, opportunity: OpportunityFeatures) -> MatchResult:
        """Score a single pair. Raises on failure; batch callers isolate it."""
        score = 0
        reasons = []

        if opportunity.industry in investor.preferred_industries:
            score += 30
            reasons.append(f"Matches preferred industry: {opportunity.industry}")
        else:
            score += 5

        amount = opportunity.min_investment_amount
        if investor.min_investment <= amount <= investor.max_investment:
            score += 25
            reasons.append("Investment amount within your range")
        elif amount < investor.min_investment:
            score += 10
            reasons.append("Lower investment threshold than preferred")

        risk = self._risk_assessor.assess(opportunity)
        fit = match_risk_tolerance(investor.risk_tolerance, risk.risk_level)
        score += fit.score
        if fit.reason:
            reasons.append(fit.reason)

        if opportunity.category in investor.investment_type:
            score += 15
            reasons.append(f"Matches investment type preference: {opportunity.category}")

        if opportunity.roi_projected_percentage > 15:
            score += 10
            reasons.append("High projected ROI")
        elif opportunity.roi_projected_percentage > 8:
            score += 5
            reasons.append("Moderate projected ROI")

        return MatchResult(
            opportunity_id=opportunity.id,
            match_score=min(100, score),
            match_reasons=reasons,
        )

    # ------------------------------------------------------------------
    # Batch scoring
    # ------------------------------------------------------------------

    def _score_all(
        self, investor: InvestorProfile, opportunities: List[OpportunityInput]
    ) -> Tuple[List[Optional[MatchResult]], List[str]]:
        results: List[Optional[MatchResult]] = [None] * len(opportunities)
        skipped: List[str] = []

        if len(opportunities) < self._parallel_threshold:
            for index, opportunity in enumerate(opportunities):
                try:
                    results[index] = self._score_one(investor, opportunity, index)
                except BatchPartialFailure as failure:
                    skipped.append(failure.item_id)
            return results, skipped

        failed: Dict[int, str] = {}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {
                executor.submit(self._score_one, investor, opportunity, index): index
                for index, opportunity in enumerate(opportunities)
            }
            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except BatchPartialFailure as failure:
                    failed[index] = failure.item_id

        skipped.extend(failed[index] for index in sorted(failed))
        return results, skipped

    def _score_one(
        self, investor: InvestorProfile, opportunity: OpportunityInput, index: int
    ) -> MatchResult:
        item_id = _opportunity_id(opportunity, index)
        try:
            features = OpportunityFeatures.model_validate(opportunity)
            return self.match(investor, features)
        except Exception as exc:
            logger.error("match_failed opportunity=%s error=%s", item_id, exc)
            raise BatchPartialFailure(item_id, exc) from exc


def _opportunity_id(opportunity: OpportunityInput, index: int) -> str:
    if isinstance(opportunity, OpportunityFeatures):
        return opportunity.id or f"#{index}"
    if isinstance(opportunity, Mapping):
        return str(opportunity.get("id") or f"#{index}")
    return f"#{index}"
