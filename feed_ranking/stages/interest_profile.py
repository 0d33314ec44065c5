"""
Interest profile: the set of tags on events the viewer has liked.

likes -> liked event ids -> those events' tags -> deduplicated union.
A viewer with no likes gets an empty profile.
"""

from typing import Iterable, Set

from ..models.event import EventTags, ensure_event_tags, ensure_likes
from ..models.gateway import EventGateway
from ..models.scoring import InterestProfile
from ..utils.scores import tag_set
from .fetch import fetch_or_fail


def interest_tags(events: Iterable[EventTags]) -> Set[str]:
    """Union of the events' tags."""
    tags: Set[str] = set()
    for ev in events:
        tags |= tag_set(ev.tags)
    return tags


async def build_interest_profile(viewer_id: str, gateway: EventGateway) -> InterestProfile:
    """Fetch the viewer's likes and the tags of the liked events."""
    likes = await fetch_or_fail(
        "fetch_likes_by_user",
        gateway.fetch_likes_by_user(viewer_id),
        ensure_likes,
    )
    liked_ids = {like.event_id for like in likes if like.event_id}
    if not liked_ids:
        return InterestProfile()

    liked_events = await fetch_or_fail(
        "fetch_events_by_ids",
        gateway.fetch_events_by_ids(sorted(liked_ids)),
        ensure_event_tags,
    )
    return InterestProfile(
        tags=frozenset(interest_tags(liked_events)),
        liked_event_ids=frozenset(liked_ids),
    )
