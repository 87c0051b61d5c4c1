"""Entrepreneur reliability scoring.

Combines four normalized activity metrics with an optional progress-note
sentiment signal into a 0-100 score plus insights and recommendations.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.weights import DEFAULT_WEIGHTS, ScoringWeights
from ..errors import ComputationFailure
from ..lifecycle import ModelLifecycle
from ..models import ActivityMetrics, AnalysisMode, ScoreResult, TextSignal, to_score
from ..signals import TextSignalAnalyzer

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = "Simplified analysis - models unavailable"
FALLBACK_RECOMMENDATIONS = ["Complete your profile", "Update milestones regularly"]
NEUTRAL_SCORE = 50


def normalize_metrics(metrics: ActivityMetrics) -> tuple[float, float, float, float]:
    """Map raw metrics onto [0, 1].

    Daily updates, 3+ contacts a week and zero overdue milestones saturate at 1;
    5 or more overdue milestones give 0.
    """
    frequency = min(metrics.milestone_update_frequency / 7, 1.0)
    completeness = metrics.profile_completeness / 100
    overdue = max(0.0, 1 - metrics.overdue_milestones / 5)
    communication = min(metrics.communication_frequency / 3, 1.0)
    return frequency, completeness, overdue, communication


def numerical_score(metrics: ActivityMetrics, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    frequency, completeness, overdue, communication = normalize_metrics(metrics)
    return 100 * (
        frequency * weights.update_frequency
        + completeness * weights.profile_completeness
        + overdue * weights.overdue_milestones
        + communication * weights.communication
    )


class ReliabilityScorer:
    def __init__(
        self,
        text_analyzer: Optional[TextSignalAnalyzer] = None,
        lifecycle: Optional[ModelLifecycle] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lifecycle = lifecycle
        self._text_analyzer = text_analyzer or TextSignalAnalyzer(lifecycle)
        self._weights = weights

    def score(self, metrics: Union[ActivityMetrics, Mapping[str, Any]]) -> ScoreResult:
        """Score an entrepreneur. Never raises; degrades to the numerical score.

        Input that fails validation has no numerical score to fall back on and
        gets the neutral score instead.
        """
        try:
            metrics = ActivityMetrics.model_validate(metrics)
        except ValidationError as exc:
            logger.warning("Reliability input rejected: %s", exc)
            return ScoreResult(
                score=NEUTRAL_SCORE,
                insights=[FALLBACK_INSIGHT],
                recommendations=list(FALLBACK_RECOMMENDATIONS),
                analysis_mode=AnalysisMode.FALLBACK,
            )

        try:
            result = self._score(metrics)
        except Exception as exc:
            logger.warning("Reliability scoring failed, using numerical fallback: %s", exc)
            result = self._fallback(metrics)

        logger.info(
            "reliability_complete score=%d mode=%s notes=%d",
            result.score,
            result.analysis_mode.value,
            len(metrics.progress_notes),
        )
        return result

    def _score(self, metrics: ActivityMetrics) -> ScoreResult:
        numeric = numerical_score(metrics, self._weights)

        # Without notes the text term is dropped, not averaged in as zero.
        signal: Optional[TextSignal] = None
        if metrics.has_progress_notes:
            signal = self._text_analyzer.analyze(metrics.progress_notes)
            final = to_score(
                numeric * self._weights.numeric_blend + signal.score * self._weights.text_blend
            )
        else:
            final = to_score(numeric)

        model_estimate = self._model_estimate(metrics)

        mode = AnalysisMode.HEURISTIC
        if model_estimate is not None or (signal and signal.analysis_mode is AnalysisMode.MODEL):
            mode = AnalysisMode.MODEL

        return ScoreResult(
            score=final,
            insights=_metric_insights(metrics) + (signal.insights if signal else []),
            recommendations=_recommendations(metrics, final),
            analysis_mode=mode,
            model_estimate=model_estimate,
        )

    def _model_estimate(self, metrics: ActivityMetrics) -> Optional[int]:
        if self._lifecycle is None:
            return None
        network = self._lifecycle.reliability_network
        if network is None:
            return None
        try:
            output = network.predict(normalize_metrics(metrics))
        except ComputationFailure as exc:
            logger.warning("Reliability network skipped: %s", exc)
            return None
        return to_score(float(output[0]) * 100)

    def _fallback(self, metrics: ActivityMetrics) -> ScoreResult:
        return ScoreResult(
            score=to_score(numerical_score(metrics, self._weights)),
            insights=[FALLBACK_INSIGHT],
            recommendations=list(FALLBACK_RECOMMENDATIONS),
            analysis_mode=AnalysisMode.FALLBACK,
        )


def _metric_insights(metrics: ActivityMetrics) -> list[str]:
    insights = []

    if metrics.profile_completeness >= 90:
        insights.append("Excellent profile completeness demonstrates commitment")
    elif metrics.profile_completeness < 70:
        insights.append("Profile completion needs attention for better credibility")

    if metrics.milestone_update_frequency >= 5:
        insights.append("Consistent milestone updates show strong project management")
    elif metrics.milestone_update_frequency < 2:
        insights.append("More frequent milestone updates would improve transparency")

    if metrics.overdue_milestones == 0:
        insights.append("No overdue milestones indicates excellent time management")
    elif metrics.overdue_milestones > 2:
        insights.append("Multiple overdue milestones may concern investors")

    return insights


def _recommendations(metrics: ActivityMetrics, score: int) -> list[str]:
    recommendations = []

    if score < 60:
        recommendations.append("Focus on completing your profile to build trust")
        recommendations.append("Provide more frequent project updates")

    if metrics.overdue_milestones > 0:
        recommendations.append("Address overdue milestones immediately")
        recommendations.append("Set more realistic milestone timelines")

    if metrics.communication_frequency < 2:
        recommendations.append("Increase communication with stakeholders")

    if score >= 80:
        recommendations.append("Excellent reliability! Consider mentoring other entrepreneurs")

    return recommendations
