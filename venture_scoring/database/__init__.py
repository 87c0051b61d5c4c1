"""Read-only access to marketplace records."""

from .client import SupabaseRecordStore
from .mappers import activity_metrics_from_records, investor_profile_from_row, opportunity_from_row

__all__ = [
    "SupabaseRecordStore",
    "activity_metrics_from_records",
    "investor_profile_from_row",
    "opportunity_from_row",
]
