"""ScoringEngine - one scoring session wiring all components to one lifecycle."""

import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_WEIGHTS, EngineSettings, ScoringWeights, load_settings, load_weights
from .lifecycle import ModelLifecycle, SentenceTransformerEmbedder
from .matching import MatchEngine
from .matching.engine import DEFAULT_MAX_WORKERS, DEFAULT_PARALLEL_THRESHOLD, InvestorInput, OpportunityInput
from .models import (
    ActivityMetrics,
    MatchResult,
    OpportunityFeatures,
    RecommendationSet,
    RiskResult,
    ScoreResult,
)
from .reliability import ReliabilityScorer
from .risk import RiskAssessor
from .signals import TextSignalAnalyzer

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Owns a ModelLifecycle and the scorers that share it.

    Use as a context manager so model resources are released when the
    session ends::

        with ScoringEngine.from_settings() as engine:
            engine.recommend(investor, opportunities)
    """

    def __init__(
        self,
        lifecycle: Optional[ModelLifecycle] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self.lifecycle = lifecycle or ModelLifecycle()
        self.weights = weights
        self.text_analyzer = TextSignalAnalyzer(self.lifecycle)
        self.reliability_scorer = ReliabilityScorer(self.text_analyzer, self.lifecycle, weights)
        self.risk_assessor = RiskAssessor(self.lifecycle, weights)
        self.match_engine = MatchEngine(
            self.risk_assessor,
            parallel_threshold=parallel_threshold,
            max_workers=max_workers,
        )

    @classmethod
    def from_settings(cls, settings: Optional[EngineSettings] = None) -> "ScoringEngine":
        settings = settings or load_settings()
        embedder = (
            SentenceTransformerEmbedder(settings.embedding_model_name)
            if settings.enable_embeddings
            else None
        )
        lifecycle = ModelLifecycle(
            embedder=embedder,
            reliability_weights_path=settings.reliability_weights_path,
            risk_weights_path=settings.risk_weights_path,
        )
        logger.info(
            "Engine configured: embeddings=%s weights=%s",
            settings.enable_embeddings,
            settings.scoring_weights_path or "default",
        )
        return cls(
            lifecycle=lifecycle,
            weights=load_weights(settings.scoring_weights_path),
            parallel_threshold=settings.parallel_threshold,
            max_workers=settings.max_workers,
        )

    # ------------------------------------------------------------------
    # Scoring entry points
    # ------------------------------------------------------------------

    def score_entrepreneur(self, metrics: ActivityMetrics) -> ScoreResult:
        return self.reliability_scorer.score(metrics)

    def assess_opportunity(self, opportunity: OpportunityFeatures) -> RiskResult:
        return self.risk_assessor.assess(opportunity)

    def recommend(
        self, investor: InvestorInput, opportunities: Sequence[OpportunityInput]
    ) -> List[MatchResult]:
        return self.match_engine.recommend(investor, opportunities)

    def recommend_with_report(
        self, investor: InvestorInput, opportunities: Sequence[OpportunityInput]
    ) -> RecommendationSet:
        return self.match_engine.recommend_with_report(investor, opportunities)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def close(self) -> None:
        self.lifecycle.dispose()

    def __enter__(self) -> "ScoringEngine":
        self.lifecycle.ensure_initialized()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def score_reliability(metrics: ActivityMetrics) -> ScoreResult:
    """Heuristic-only reliability score."""
    return ScoringEngine().score_entrepreneur(metrics)


def assess_risk(opportunity: OpportunityFeatures) -> RiskResult:
    """Heuristic-only risk assessment."""
    return ScoringEngine().assess_opportunity(opportunity)


def recommend(
    investor: InvestorInput, opportunities: Sequence[OpportunityInput]
) -> List[MatchResult]:
    """Heuristic-only recommendations."""
    return ScoringEngine().recommend(investor, opportunities)
