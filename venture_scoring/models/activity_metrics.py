"""ActivityMetrics - Input snapshot for entrepreneur reliability scoring."""

from pydantic import BaseModel, ConfigDict, Field


class ActivityMetrics(BaseModel):
    """Structured activity metrics for one entrepreneur.

    Immutable snapshot passed per scoring call. Field names also accept the
    camelCase spelling used by the marketplace front end.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "milestone_update_frequency": 4.5,
                "profile_completeness": 85,
                "overdue_milestones": 1,
                "communication_frequency": 2.5,
                "progress_notes": [
                    "Completed supplier onboarding ahead of plan",
                    "Packaging line delayed by two weeks",
                ],
            }
        },
    )

    milestone_update_frequency: float = Field(
        ..., ge=0, alias="milestoneUpdateFrequency", description="Milestone updates per week"
    )
    profile_completeness: float = Field(
        ..., ge=0, le=100, alias="profileCompleteness", description="Profile completion percentage"
    )
    overdue_milestones: int = Field(
        ..., ge=0, alias="overdueMilestones", description="Number of overdue milestones"
    )
    communication_frequency: float = Field(
        ..., ge=0, alias="communicationFrequency", description="Stakeholder contacts per week"
    )
    progress_notes: tuple[str, ...] = Field(
        default=(), alias="progressNotes", description="Free-text progress notes, oldest first"
    )

    @property
    def has_progress_notes(self) -> bool:
        return len(self.progress_notes) > 0
