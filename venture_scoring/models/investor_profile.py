"""InvestorProfile - Investor preferences used by the match engine."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .risk_result import RiskLevel


class InvestorProfile(BaseModel):
    """Investor preference profile.

    Validated once at construction: investment bounds must satisfy
    ``min_investment <= max_investment``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    preferred_industries: frozenset[str] = Field(
        default_factory=frozenset, alias="preferredIndustries", description="Preferred industries"
    )
    min_investment: float = Field(..., ge=0, alias="minInvestment", description="Lower ticket bound")
    max_investment: float = Field(..., ge=0, alias="maxInvestment", description="Upper ticket bound")
    risk_tolerance: RiskLevel = Field(..., alias="riskTolerance", description="LOW, MEDIUM or HIGH")
    investment_type: frozenset[str] = Field(
        default_factory=frozenset, alias="investmentType", description="Accepted opportunity categories"
    )

    @model_validator(mode="after")
    def check_bounds(self) -> "InvestorProfile":
        if self.min_investment > self.max_investment:
            raise ValueError(
                f"min_investment ({self.min_investment:,.0f}) exceeds "
                f"max_investment ({self.max_investment:,.0f})"
            )
        return self
