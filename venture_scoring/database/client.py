"""Read-only Supabase record store for the marketplace tables.

The engine never writes: score results go back to the caller, who decides
what to persist.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

logger = logging.getLogger(__name__)

LIVE_STATUS = "FUNDING_LIVE"


class SupabaseRecordStore:
    """Fetches opportunity, user, investor and milestone rows by id."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        """Initialize Supabase client from explicit args or env vars.

        Args:
            url: Supabase project URL (falls back to SUPABASE_URL env var).
            key: Supabase anon/service key (falls back to SUPABASE_KEY env var).
        """
        self._url = url or os.environ["SUPABASE_URL"]
        self._key = key or os.environ["SUPABASE_KEY"]
        self._client: Client = create_client(self._url, self._key)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_opportunity(self, opportunity_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one("opportunities", "id", opportunity_id)

    def list_live_opportunities(self, limit: int = 100) -> List[Dict[str, Any]]:
        """Return opportunities currently open for funding, newest first."""
        response = (
            self._client.table("opportunities")
            .select("*")
            .eq("status", LIVE_STATUS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        logger.info("Fetched %d live opportunities", len(response.data))
        return list(response.data)

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one("users", "id", user_id)

    def get_investor_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one("investor_profiles", "user_id", user_id)

    def get_milestones(self, opportunity_id: str) -> List[Dict[str, Any]]:
        """Return milestones of an opportunity ordered by target date."""
        response = (
            self._client.table("milestones")
            .select("*")
            .eq("opportunity_id", opportunity_id)
            .order("target_date")
            .execute()
        )
        return list(response.data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_one(self, table: str, column: str, value: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(table)
            .select("*")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            logger.warning("No %s row with %s=%s", table, column, value)
            return None
        return response.data[0]
