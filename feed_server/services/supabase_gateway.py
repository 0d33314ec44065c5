"""
Supabase event gateway: reads events, event_likes, event_attendees and follows.

Used when DATA_SOURCE=supabase. The service key bypasses row-level security, so
personalized candidate queries restrict private events to those the viewer created
or was approved to attend. Uses the async client so the pipeline can fan out the
likes and follows reads.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

from supabase import AsyncClient, acreate_client

from feed_ranking import CandidateFilter

logger = logging.getLogger(__name__)

# Candidate rows embed the creator profile, likes and attendance in one request
CANDIDATE_SELECT = (
    "*, "
    "profiles:creator_id (username, full_name, avatar_url), "
    "event_likes (user_id), "
    "event_attendees (user_id, status)"
)


def _row_to_event(row: Dict[str, Any]) -> Dict[str, Any]:
    """Rename embedded relations to the pipeline's field names."""
    out = dict(row)
    out["creator"] = out.pop("profiles", None)
    out["likes"] = out.pop("event_likes", None) or []
    out["attendees"] = out.pop("event_attendees", None) or []
    return out


class SupabaseEventGateway:
    """Event gateway backed by Supabase (PostgREST) tables."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        client: Optional[AsyncClient] = None,
    ):
        if client is None and not (url and key):
            raise ValueError("SupabaseEventGateway requires url and key, or a client")
        self._url = url
        self._key = key
        self._client = client
        self._client_lock = asyncio.Lock()

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            # likes and follows are read concurrently; only one of them creates the client
            async with self._client_lock:
                if self._client is None:
                    self._client = await acreate_client(self._url, self._key)
                    logger.info("[supabase] CLIENT_CREATED url=%s", self._url)
        return self._client

    async def fetch_likes_by_user(self, user_id: str) -> List[Dict]:
        client = await self._get_client()
        res = await (
            client.table("event_likes")
            .select("event_id, user_id")
            .eq("user_id", user_id)
            .execute()
        )
        return res.data or []

    async def fetch_events_by_ids(self, ids: Iterable[str]) -> List[Dict]:
        ids = list(ids)
        if not ids:
            return []
        client = await self._get_client()
        res = await (
            client.table("events")
            .select("id, tags")
            .in_("id", ids)
            .execute()
        )
        return res.data or []

    async def fetch_follows(self, follower_id: str) -> List[Dict]:
        client = await self._get_client()
        res = await (
            client.table("follows")
            .select("following_id")
            .eq("follower_id", follower_id)
            .execute()
        )
        return res.data or []

    async def _approved_event_ids(self, client: AsyncClient, viewer_id: str) -> List[str]:
        res = await (
            client.table("event_attendees")
            .select("event_id")
            .eq("user_id", viewer_id)
            .eq("status", "approved")
            .execute()
        )
        return [r["event_id"] for r in (res.data or [])]

    async def _access_clause(self, client: AsyncClient, viewer_id: str) -> str:
        """PostgREST or-filter: public, created by the viewer, or approved to attend."""
        clauses = ["visibility.eq.public", f"creator_id.eq.{viewer_id}"]
        approved = await self._approved_event_ids(client, viewer_id)
        if approved:
            clauses.append(f"id.in.({','.join(approved)})")
        return ",".join(clauses)

    async def fetch_candidate_events(self, candidate_filter: CandidateFilter) -> List[Dict]:
        client = await self._get_client()
        access = None
        if candidate_filter.visibility is None and candidate_filter.viewer_id:
            access = await self._access_clause(client, candidate_filter.viewer_id)
        query = (
            client.table("events")
            .select(CANDIDATE_SELECT)
            .gte("event_date", candidate_filter.min_date.isoformat())
        )
        if candidate_filter.visibility is not None:
            query = query.eq("visibility", candidate_filter.visibility.value)
        elif access:
            query = query.or_(access)
        res = await (
            query.order(candidate_filter.order_by, desc=not candidate_filter.ascending)
            .limit(candidate_filter.limit)
            .execute()
        )
        return [_row_to_event(r) for r in (res.data or [])]
