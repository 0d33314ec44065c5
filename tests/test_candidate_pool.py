"""
Candidate pool selection: filters, ordering, caps and private-event access.
"""

import asyncio

from feed_ranking.models import FeedKind, RankingConfig, Visibility
from feed_ranking.stages.candidate_pool import (
    build_candidate_filter,
    get_candidate_pool,
    viewer_can_see,
)
from feed_server.services import JsonEventGateway

from helpers import NOW, event, make_event, table_rows


def _pool(events, feed_kind, viewer_id="viewer", config=None):
    gateway = JsonEventGateway(table_rows(events))
    return asyncio.run(
        get_candidate_pool(viewer_id, feed_kind, gateway, NOW, config or RankingConfig())
    )


class TestCandidateFilter:

    def test_personalized(self):
        f = build_candidate_filter(FeedKind.PERSONALIZED, NOW)
        assert f.visibility is None
        assert f.min_date == NOW
        assert f.order_by == "event_date"
        assert f.ascending is True
        assert f.limit == 20

    def test_bridging(self):
        f = build_candidate_filter(FeedKind.BRIDGING, NOW)
        assert f.visibility == Visibility.PUBLIC
        assert f.min_date == NOW
        assert f.order_by == "created_at"
        assert f.ascending is False
        assert f.limit == 30


class TestPersonalizedPool:

    def test_upcoming_only_by_event_date_ascending(self):
        events = [
            make_event("later", starts_in_days=10),
            make_event("past", starts_in_days=-1),
            make_event("soon", starts_in_days=1),
        ]
        pool = _pool(events, FeedKind.PERSONALIZED)
        assert [e.id for e in pool] == ["soon", "later"]

    def test_capped_at_twenty(self):
        events = [make_event(f"e{i:02d}", starts_in_days=i + 1) for i in range(25)]
        pool = _pool(events, FeedKind.PERSONALIZED)
        assert len(pool) == 20
        assert pool[0].id == "e00"
        assert pool[-1].id == "e19"

    def test_private_event_hidden_from_strangers(self):
        events = [
            make_event("private", visibility="private", creator_id="host"),
            make_event("public", starts_in_days=8),
        ]
        assert [e.id for e in _pool(events, FeedKind.PERSONALIZED)] == ["public"]

    def test_private_event_visible_to_creator_and_approved_attendee(self):
        events = [
            make_event(
                "private",
                visibility="private",
                creator_id="host",
                attendees=[("guest", "approved"), ("hopeful", "pending")],
            ),
        ]
        assert [e.id for e in _pool(events, FeedKind.PERSONALIZED, "host")] == ["private"]
        assert [e.id for e in _pool(events, FeedKind.PERSONALIZED, "guest")] == ["private"]
        assert _pool(events, FeedKind.PERSONALIZED, "hopeful") == []

    def test_hidden_private_events_do_not_use_up_the_cap(self):
        events = [
            make_event(f"private-{i:02d}", visibility="private", creator_id="host",
                       starts_in_days=1 + i / 10)
            for i in range(20)
        ]
        events.append(make_event("public-later", starts_in_days=10))
        assert [e.id for e in _pool(events, FeedKind.PERSONALIZED)] == ["public-later"]
        assert len(_pool(events, FeedKind.PERSONALIZED, "host")) == 20

    def test_filter_carries_viewer_for_personalized_only(self):
        assert build_candidate_filter(
            FeedKind.PERSONALIZED, NOW, viewer_id="viewer"
        ).viewer_id == "viewer"
        assert build_candidate_filter(
            FeedKind.BRIDGING, NOW, viewer_id="viewer"
        ).viewer_id is None

    def test_embeds_likes_and_attendees(self):
        events = [make_event("e1", likes=["a", "b"], attendees=[("a", "approved")])]
        pool = _pool(events, FeedKind.PERSONALIZED)
        assert [like.user_id for like in pool[0].likes] == ["a", "b"]
        assert pool[0].attendees[0].status == "approved"

    def test_configured_pool_size(self):
        events = [make_event(f"e{i}", starts_in_days=i + 1) for i in range(5)]
        pool = _pool(events, FeedKind.PERSONALIZED, config=RankingConfig(personalized_pool_size=2))
        assert [e.id for e in pool] == ["e0", "e1"]


class TestBridgingPool:

    def test_public_upcoming_newest_first(self):
        events = [
            make_event("old", created_hours_ago=100),
            make_event("new", created_hours_ago=1),
            make_event("private", created_hours_ago=2, visibility="private", creator_id="viewer"),
            make_event("past", created_hours_ago=0.5, starts_in_days=-2),
            make_event("mid", created_hours_ago=50),
        ]
        pool = _pool(events, FeedKind.BRIDGING)
        assert [e.id for e in pool] == ["new", "mid", "old"]

    def test_capped_at_thirty(self):
        events = [make_event(f"e{i:02d}", created_hours_ago=i + 1) for i in range(35)]
        pool = _pool(events, FeedKind.BRIDGING)
        assert len(pool) == 30
        assert pool[0].id == "e00"


def test_viewer_can_see_public():
    assert viewer_can_see(event("e", visibility="public"), "anyone")
