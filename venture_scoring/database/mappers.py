"""Convert record-store rows into engine value types.

This is the validation boundary: rows are checked once here and the scorers
work with typed, immutable values afterwards.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from ..models import ActivityMetrics, InvestorProfile, OpportunityFeatures

UPDATE_WINDOW_DAYS = 28


def opportunity_from_row(
    row: Dict[str, Any], reliability_score: Optional[float] = None
) -> OpportunityFeatures:
    """Build OpportunityFeatures from an ``opportunities`` row.

    The entrepreneur's reliability score lives on the user record, so callers
    usually pass it explicitly.
    """
    if reliability_score is None:
        reliability_score = row.get("entrepreneur_reliability_score")
    if reliability_score is None:
        raise ValueError(f"Opportunity {row.get('id')} has no entrepreneur reliability score")

    return OpportunityFeatures(
        id=str(row["id"]),
        title=row.get("title"),
        category=row["category"],
        industry=row["industry"],
        funding_goal=row["funding_goal"],
        description=row.get("description") or "",
        entrepreneur_reliability_score=reliability_score,
        funding_stage=row["funding_stage"],
        min_investment_amount=row.get("min_investment_amount") or 0,
        roi_projected_percentage=row.get("roi_projected_percentage") or 0,
    )


def investor_profile_from_row(row: Dict[str, Any]) -> InvestorProfile:
    """Build InvestorProfile from an ``investor_profiles`` row."""
    prefs = row.get("investment_preferences") or {}
    investment_types = prefs.get("investment_types") or row.get("investment_types") or []

    return InvestorProfile(
        preferred_industries=prefs.get("preferred_industries") or [],
        min_investment=prefs.get("min_investment", 0),
        max_investment=prefs.get("max_investment", 0),
        risk_tolerance=prefs.get("risk_tolerance", "MEDIUM"),
        investment_type=investment_types,
    )


def activity_metrics_from_records(
    user: Dict[str, Any],
    milestones: Iterable[Dict[str, Any]],
    communication_frequency: float = 0.0,
    now: Optional[datetime] = None,
) -> ActivityMetrics:
    """Derive ActivityMetrics from a user row and the entrepreneur's milestones.

    - overdue: status OVERDUE, or target date passed and not COMPLETED
    - update frequency: milestones updated in the trailing 28 days, per week
    - progress notes: non-empty notes, oldest update first
    """
    now = _parse_datetime(now) or datetime.now(timezone.utc)
    today = now.date()
    window_start = now - timedelta(days=UPDATE_WINDOW_DAYS)

    overdue = 0
    recent_updates = 0
    dated_notes = []

    for milestone in milestones:
        status = (milestone.get("status") or "").upper()
        target = _parse_date(milestone.get("target_date"))
        if status == "OVERDUE" or (
            status != "COMPLETED" and target is not None and target < today
        ):
            overdue += 1

        updated_at = _parse_datetime(milestone.get("updated_at"))
        if updated_at is not None and window_start <= updated_at <= now:
            recent_updates += 1

        note = (milestone.get("progress_notes") or "").strip()
        if note:
            dated_notes.append((updated_at or datetime.min.replace(tzinfo=timezone.utc), note))

    dated_notes.sort(key=lambda item: item[0])

    return ActivityMetrics(
        milestone_update_frequency=recent_updates / (UPDATE_WINDOW_DAYS / 7),
        profile_completeness=user.get("profile_completion_percentage") or 0,
        overdue_milestones=overdue,
        communication_frequency=communication_frequency,
        progress_notes=tuple(note for _, note in dated_notes),
    )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])
