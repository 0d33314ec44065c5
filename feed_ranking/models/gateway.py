"""
Data Access Gateway contract — the queries the ranking core needs.

Implementations live in the server (JSON file, Supabase). Methods return plain
dicts (rows); the pipeline converts them to models.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Literal, Optional, Protocol

from pydantic import BaseModel

from .event import Visibility


class CandidateFilter(BaseModel):
    """
    Predicate for fetch_candidate_events: upcoming events, ordered and capped.

    With no visibility restriction and a viewer_id, private events the viewer cannot
    access are dropped before the limit applies.
    """

    visibility: Optional[Visibility] = None
    viewer_id: Optional[str] = None
    min_date: datetime
    order_by: Literal["event_date", "created_at"] = "event_date"
    ascending: bool = True
    limit: int = 20


class EventGateway(Protocol):
    """Protocol for the data store behind the feed. Implement for JSON file or Supabase."""

    async def fetch_likes_by_user(self, user_id: str) -> List[Dict]:
        """Return like rows {event_id, user_id} for the user."""
        ...

    async def fetch_events_by_ids(self, ids: Iterable[str]) -> List[Dict]:
        """Return {id, tags} for each existing event id."""
        ...

    async def fetch_follows(self, follower_id: str) -> List[Dict]:
        """Return {following_id} rows for everyone the follower follows."""
        ...

    async def fetch_candidate_events(self, candidate_filter: CandidateFilter) -> List[Dict]:
        """
        Return events matching the filter, in the requested order, with embedded
        likes ([{user_id}]), attendees ([{user_id, status}]) and creator profile.
        """
        ...
