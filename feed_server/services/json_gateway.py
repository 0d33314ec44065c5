"""
Event gateway backed by a JSON file (or an in-memory dict with the same shape).

Used when DATA_SOURCE=json, for local runs and tests. The document mirrors the
production tables:

    {
      "events": [...], "event_likes": [...], "event_attendees": [...],
      "follows": [...], "profiles": [...]
    }

Filtering, ordering and limits are applied in memory with the same semantics as
the Supabase queries.
"""

import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from feed_ranking import CandidateFilter
from feed_ranking.utils import parse_timestamp

TABLES = ("events", "event_likes", "event_attendees", "follows", "profiles")


class JsonEventGateway:
    """
    In-memory event gateway. Rows are kept as loaded; embedded likes, attendees and
    creator profile are attached per candidate on read.
    """

    def __init__(self, data: Optional[Dict[str, List[Dict]]] = None):
        data = data or {}
        unknown = set(data) - set(TABLES)
        if unknown:
            raise ValueError(f"Unknown tables in events data: {sorted(unknown)}")
        self._events: List[Dict] = list(data.get("events") or [])
        self._likes: List[Dict] = list(data.get("event_likes") or [])
        self._attendees: List[Dict] = list(data.get("event_attendees") or [])
        self._follows: List[Dict] = list(data.get("follows") or [])
        self._profiles: Dict[str, Dict] = {
            p["id"]: p for p in (data.get("profiles") or []) if p.get("id")
        }
        self._event_by_id = {e["id"]: e for e in self._events if e.get("id")}

    @classmethod
    def from_path(cls, path: Union[Path, str]) -> "JsonEventGateway":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Events JSON not found: {path}")
        with open(path) as f:
            return cls(json.load(f))

    def _likes_by_event(self) -> Dict[str, List[Dict]]:
        out: Dict[str, List[Dict]] = defaultdict(list)
        for like in self._likes:
            out[like.get("event_id", "")].append({"user_id": like.get("user_id")})
        return out

    def _attendees_by_event(self) -> Dict[str, List[Dict]]:
        out: Dict[str, List[Dict]] = defaultdict(list)
        for att in self._attendees:
            out[att.get("event_id", "")].append({
                "user_id": att.get("user_id"),
                "status": att.get("status", "pending"),
            })
        return out

    def _creator_profile(self, creator_id: str) -> Optional[Dict]:
        profile = self._profiles.get(creator_id)
        if not profile:
            return None
        return {
            "username": profile.get("username"),
            "full_name": profile.get("full_name"),
            "avatar_url": profile.get("avatar_url"),
        }

    async def fetch_likes_by_user(self, user_id: str) -> List[Dict]:
        return [
            {"event_id": like.get("event_id"), "user_id": like.get("user_id")}
            for like in self._likes
            if like.get("user_id") == user_id
        ]

    async def fetch_events_by_ids(self, ids: Iterable[str]) -> List[Dict]:
        out = []
        for eid in ids:
            ev = self._event_by_id.get(eid)
            if ev is not None:
                out.append({"id": ev["id"], "tags": ev.get("tags")})
        return out

    async def fetch_follows(self, follower_id: str) -> List[Dict]:
        return [
            {"following_id": f.get("following_id")}
            for f in self._follows
            if f.get("follower_id") == follower_id
        ]

    @staticmethod
    def _visible_to(event: Dict, viewer_id: str, attendees: List[Dict]) -> bool:
        if event.get("visibility", "public") != "private":
            return True
        if event.get("creator_id") == viewer_id:
            return True
        return any(
            a["user_id"] == viewer_id and a["status"] == "approved" for a in attendees
        )

    async def fetch_candidate_events(self, candidate_filter: CandidateFilter) -> List[Dict]:
        likes = self._likes_by_event()
        attendees = self._attendees_by_event()
        events = [
            e for e in self._events
            if parse_timestamp(e["event_date"]) >= candidate_filter.min_date
        ]
        if candidate_filter.visibility is not None:
            wanted = candidate_filter.visibility.value
            events = [e for e in events if e.get("visibility", "public") == wanted]
        elif candidate_filter.viewer_id:
            viewer_id = candidate_filter.viewer_id
            events = [
                e for e in events
                if self._visible_to(e, viewer_id, attendees.get(e["id"], []))
            ]
        # sorted() is stable, so rows with equal keys keep file order
        events = sorted(
            events,
            key=lambda e: parse_timestamp(e[candidate_filter.order_by]),
            reverse=not candidate_filter.ascending,
        )
        events = events[: candidate_filter.limit]

        return [
            {
                **e,
                "creator": self._creator_profile(e.get("creator_id", "")),
                "likes": likes.get(e["id"], []),
                "attendees": attendees.get(e["id"], []),
            }
            for e in events
        ]
