"""OpportunityFeatures - Read-only opportunity attributes used for risk and matching."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FundingStage(str, Enum):
    SEED = "SEED"
    STARTUP = "STARTUP"
    GROWTH = "GROWTH"


class OpportunityFeatures(BaseModel):
    """Opportunity record as seen by the scoring engine.

    Carries the structural attributes the risk assessor reads plus the
    investment terms the match engine compares against investor preferences.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "opp-001",
                "title": "Cold-chain storage for smallholder farms",
                "category": "GOING_CONCERN",
                "industry": "Agriculture",
                "funding_goal": 45000,
                "description": "Established cooperative expanding proven storage units.",
                "entrepreneur_reliability_score": 82,
                "funding_stage": "GROWTH",
                "min_investment_amount": 1000,
                "roi_projected_percentage": 12.5,
            }
        },
    )

    id: str = Field(default="", description="Opportunity identifier in the record store")
    title: Optional[str] = Field(None, description="Opportunity title")
    category: str = Field(..., description="GOING_CONCERN, ORDER_FULFILLMENT, PROJECT_PARTNERSHIP")
    industry: str = Field(..., description="Industry label")
    funding_goal: float = Field(..., ge=0, alias="fundingGoal", description="Funding goal amount")
    description: str = Field(default="", description="Free-text business description")
    entrepreneur_reliability_score: float = Field(
        ..., ge=0, le=100, alias="entrepreneurReliabilityScore",
        description="Reliability score of the entrepreneur (0-100)",
    )
    funding_stage: FundingStage = Field(..., alias="fundingStage", description="Funding stage")
    min_investment_amount: float = Field(
        default=0, ge=0, alias="minInvestmentAmount", description="Smallest accepted ticket"
    )
    roi_projected_percentage: float = Field(
        default=0, alias="roiProjectedPercentage", description="Projected ROI in percent"
    )
