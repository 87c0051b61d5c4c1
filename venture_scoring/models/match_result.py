"""MatchResult - Ranked investor/opportunity recommendation."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    opportunity_id: str = Field(..., description="Links to OpportunityFeatures.id")
    match_score: int = Field(..., ge=0, le=100)
    match_reasons: list[str] = Field(default_factory=list)


class RecommendationSet(BaseModel):
    """Recommendations plus the ids of opportunities that could not be scored."""

    model_config = ConfigDict(frozen=True)

    recommended_opportunities: list[MatchResult] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list, description="Opportunity ids dropped after a failure")
