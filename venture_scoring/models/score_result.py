"""Reliability and text-signal result models."""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalysisMode(str, Enum):
    """How a result was produced.

    MODEL: an embedding or trained network contributed to the result.
    HEURISTIC: keyword and formula rules only.
    FALLBACK: the full path failed and a simplified result was returned.
    """

    MODEL = "MODEL"
    HEURISTIC = "HEURISTIC"
    FALLBACK = "FALLBACK"


def to_score(value: float) -> int:
    """Round half up and clamp into the 0-100 score range."""
    return max(0, min(100, int(math.floor(value + 0.5))))


class TextSignal(BaseModel):
    """Output of the text signal analyzer."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100)
    insights: list[str] = Field(default_factory=list)
    analysis_mode: AnalysisMode = AnalysisMode.HEURISTIC
    embedding_norm: Optional[float] = Field(None, description="L2 norm of the corpus embedding, when produced")


class ScoreResult(BaseModel):
    """Entrepreneur reliability score with explanations."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    analysis_mode: AnalysisMode = AnalysisMode.HEURISTIC
    model_estimate: Optional[int] = Field(
        None, ge=0, le=100, description="Advisory score from the reliability network, if loaded"
    )

    @property
    def is_fallback(self) -> bool:
        return self.analysis_mode is AnalysisMode.FALLBACK
