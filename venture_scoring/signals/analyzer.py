"""Text signal analysis for entrepreneur progress notes.

Keyword heuristic is authoritative; an embedding of the corpus is computed
when the lifecycle has one available but never changes the score.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..lifecycle import ModelLifecycle
from ..models import AnalysisMode, TextSignal
from .keywords import NEGATIVE_MARKERS, POSITIVE_MARKERS, count_markers

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50.0
MIN_NOTES_FOR_CONFIDENCE = 3

INSIGHT_POSITIVE = "Progress notes show predominantly positive sentiment and confidence"
INSIGHT_NEGATIVE = "Progress notes indicate challenges - consider addressing concerns"
INSIGHT_FEW_NOTES = "Insufficient updates for a confident reading - more frequent progress notes would help"
INSIGHT_UNAVAILABLE = "Text analysis unavailable"


class TextSignalAnalyzer:
    """Turns free-text reports into a bounded sentiment score and insights."""

    def __init__(self, lifecycle: Optional[ModelLifecycle] = None):
        self._lifecycle = lifecycle

    def analyze(self, texts: Sequence[str]) -> TextSignal:
        """Score texts in [30, 70] (50 when neutral). Never raises."""
        if not texts:
            return TextSignal(score=NEUTRAL_SCORE)

        try:
            return self._analyze(list(texts))
        except Exception as exc:
            logger.warning("Text analysis failed, returning neutral signal: %s", exc)
            return TextSignal(
                score=NEUTRAL_SCORE,
                insights=[INSIGHT_UNAVAILABLE],
                analysis_mode=AnalysisMode.FALLBACK,
            )

    def _analyze(self, texts: list[str]) -> TextSignal:
        corpus = " ".join(texts)
        corpus_lower = corpus.lower()

        positive = count_markers(corpus_lower, POSITIVE_MARKERS)
        negative = count_markers(corpus_lower, NEGATIVE_MARKERS)

        score = sentiment_score(positive, negative)
        insights = _sentiment_insights(positive, negative, len(texts))

        embedding_norm = None
        mode = AnalysisMode.HEURISTIC
        if self._lifecycle is not None:
            vector = self._lifecycle.embed([corpus])
            if vector is not None:
                embedding_norm = float(np.linalg.norm(vector))
                mode = AnalysisMode.MODEL

        return TextSignal(
            score=score,
            insights=insights,
            analysis_mode=mode,
            embedding_norm=embedding_norm,
        )


def sentiment_score(positive: int, negative: int) -> float:
    total = positive + negative
    if total == 0:
        return NEUTRAL_SCORE
    return 30.0 + (positive / total) * 40.0


def _sentiment_insights(positive: int, negative: int, note_count: int) -> list[str]:
    insights = []
    if positive > negative:
        insights.append(INSIGHT_POSITIVE)
    elif negative > positive:
        insights.append(INSIGHT_NEGATIVE)

    if note_count < MIN_NOTES_FOR_CONFIDENCE:
        insights.append(INSIGHT_FEW_NOTES)
    return insights
