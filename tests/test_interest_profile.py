"""
Interest profile: union of tags on events the viewer liked.
"""

import asyncio

import pytest

from feed_ranking import DataAccessFailure
from feed_ranking.stages.interest_profile import build_interest_profile
from feed_server.services import JsonEventGateway

from helpers import FailingGateway, RecordingGateway, make_event, table_rows


def _gateway(events, likes):
    data = table_rows(events)
    data["event_likes"] = [{"event_id": e, "user_id": u} for e, u in likes]
    return JsonEventGateway(data)


def test_no_likes_gives_empty_profile_without_event_fetch():
    gateway = RecordingGateway(_gateway([make_event("e1", tags=["music"])], []))
    profile = asyncio.run(build_interest_profile("viewer", gateway))
    assert profile.tags == frozenset()
    assert profile.liked_event_ids == frozenset()
    assert profile.is_empty
    assert gateway.calls == ["fetch_likes_by_user"]


def test_union_of_liked_event_tags_deduplicated():
    gateway = _gateway(
        [
            make_event("e1", tags=["music", "tech"]),
            make_event("e2", tags=["music", "music", "art"]),
            make_event("e3", tags=["sports"]),
        ],
        [("e1", "viewer"), ("e2", "viewer"), ("e3", "someone-else")],
    )
    profile = asyncio.run(build_interest_profile("viewer", gateway))
    assert profile.tags == frozenset({"music", "tech", "art"})
    assert profile.liked_event_ids == frozenset({"e1", "e2"})


def test_liked_event_without_tags():
    gateway = _gateway([make_event("e1", tags=None)], [("e1", "viewer")])
    profile = asyncio.run(build_interest_profile("viewer", gateway))
    assert profile.tags == frozenset()
    assert profile.liked_event_ids == frozenset({"e1"})


def test_like_on_missing_event_is_ignored_for_tags():
    gateway = _gateway([make_event("e1", tags=["music"])], [("e1", "viewer"), ("gone", "viewer")])
    profile = asyncio.run(build_interest_profile("viewer", gateway))
    assert profile.tags == frozenset({"music"})
    assert "gone" in profile.liked_event_ids


def test_gateway_error_becomes_data_access_failure():
    gateway = FailingGateway(_gateway([], []), "fetch_likes_by_user")
    with pytest.raises(DataAccessFailure) as exc_info:
        asyncio.run(build_interest_profile("viewer", gateway))
    assert exc_info.value.operation == "fetch_likes_by_user"
    assert isinstance(exc_info.value.__cause__, ConnectionError)
