"""Progress-note sentiment analysis."""

from .analyzer import TextSignalAnalyzer, sentiment_score
from .keywords import NEGATIVE_MARKERS, POSITIVE_MARKERS

__all__ = ["NEGATIVE_MARKERS", "POSITIVE_MARKERS", "TextSignalAnalyzer", "sentiment_score"]
