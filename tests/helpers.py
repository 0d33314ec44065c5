"""
Shared builders for feed ranking tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from feed_ranking.models import Event, ScoringContext

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_event(
    event_id: str,
    tags: Optional[List[str]] = None,
    creator_id: str = "creator",
    created_hours_ago: float = 72,
    starts_in_days: float = 7,
    visibility: str = "public",
    likes: Iterable[str] = (),
    attendees: Iterable[tuple] = (),
    **extra,
) -> Dict:
    """Event row as a gateway returns it (likes/attendees embedded)."""
    return {
        "id": event_id,
        "creator_id": creator_id,
        "tags": list(tags or []),
        "event_date": (NOW + timedelta(days=starts_in_days)).isoformat(),
        "created_at": (NOW - timedelta(hours=created_hours_ago)).isoformat(),
        "visibility": visibility,
        "likes": [{"user_id": u} for u in likes],
        "attendees": [{"user_id": u, "status": s} for u, s in attendees],
        **extra,
    }


def event(event_id: str, **kwargs) -> Event:
    return Event.model_validate(make_event(event_id, **kwargs))


def context(
    interests: Iterable[str] = (),
    following: Iterable[str] = (),
    liked: Iterable[str] = (),
    viewer_id: str = "viewer",
) -> ScoringContext:
    return ScoringContext(
        viewer_id=viewer_id,
        interests=frozenset(interests),
        following_ids=frozenset(following),
        liked_event_ids=frozenset(liked),
        now=NOW,
    )


def table_rows(events: List[Dict]) -> Dict[str, List[Dict]]:
    """Split embedded event rows into the JSON gateway's table layout."""
    out: Dict[str, List[Dict]] = {"events": [], "event_likes": [], "event_attendees": []}
    for ev in events:
        row = {k: v for k, v in ev.items() if k not in ("likes", "attendees")}
        out["events"].append(row)
        out["event_likes"].extend(
            {"event_id": ev["id"], "user_id": like["user_id"]} for like in ev.get("likes", [])
        )
        out["event_attendees"].extend(
            {"event_id": ev["id"], **att} for att in ev.get("attendees", [])
        )
    return out


class RecordingGateway:
    """Wraps a gateway and records which methods were awaited."""

    def __init__(self, inner):
        self._inner = inner
        self.calls: List[str] = []

    async def fetch_likes_by_user(self, user_id):
        self.calls.append("fetch_likes_by_user")
        return await self._inner.fetch_likes_by_user(user_id)

    async def fetch_events_by_ids(self, ids):
        self.calls.append("fetch_events_by_ids")
        return await self._inner.fetch_events_by_ids(ids)

    async def fetch_follows(self, follower_id):
        self.calls.append("fetch_follows")
        return await self._inner.fetch_follows(follower_id)

    async def fetch_candidate_events(self, candidate_filter):
        self.calls.append("fetch_candidate_events")
        return await self._inner.fetch_candidate_events(candidate_filter)


class FailingGateway(RecordingGateway):
    """Gateway whose named operation raises."""

    def __init__(self, inner, failing_op: str, error: Exception = None):
        super().__init__(inner)
        self._failing_op = failing_op
        self._error = error or ConnectionError("connection reset by peer")

    async def fetch_likes_by_user(self, user_id):
        if self._failing_op == "fetch_likes_by_user":
            raise self._error
        return await super().fetch_likes_by_user(user_id)

    async def fetch_events_by_ids(self, ids):
        if self._failing_op == "fetch_events_by_ids":
            raise self._error
        return await super().fetch_events_by_ids(ids)

    async def fetch_follows(self, follower_id):
        if self._failing_op == "fetch_follows":
            raise self._error
        return await super().fetch_follows(follower_id)

    async def fetch_candidate_events(self, candidate_filter):
        if self._failing_op == "fetch_candidate_events":
            raise self._error
        return await super().fetch_candidate_events(candidate_filter)
