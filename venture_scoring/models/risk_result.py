"""RiskResult - Output model for opportunity risk assessment."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .score_result import AnalysisMode


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def from_score(cls, score: float) -> "RiskLevel":
        """Thresholds: LOW < 30, MEDIUM < 60, HIGH otherwise."""
        if score < 30:
            return cls.LOW
        if score < 60:
            return cls.MEDIUM
        return cls.HIGH


class RiskResult(BaseModel):
    """Risk score, tier, factors and mitigation suggestions.

    ``risk_level`` is always derived from ``risk_score``.
    """

    model_config = ConfigDict(frozen=True)

    risk_score: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    risk_factors: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    analysis_mode: AnalysisMode = AnalysisMode.HEURISTIC
    model_risk_level: Optional[RiskLevel] = Field(
        None, description="Advisory tier from the risk network, if loaded"
    )

    @model_validator(mode="before")
    @classmethod
    def derive_level(cls, data):
        if isinstance(data, dict) and "risk_score" in data:
            data = dict(data)
            data["risk_level"] = RiskLevel.from_score(data["risk_score"])
        return data
