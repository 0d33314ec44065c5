"""
Candidate Pool Selection

Fetches the bounded set of upcoming events a feed is ranked from.
- personalized: upcoming events by event date ascending, capped at personalized_pool_size.
- bridging: upcoming public events by creation time descending, capped at bridging_pool_size.

Candidates come back with likes, attendees and creator embedded in one gateway call.
The data store does not enforce row-level visibility, so the personalized filter
carries the viewer and gateways drop private events the viewer cannot access before
the cap. The pool re-checks access on what comes back.

The public entry point is get_candidate_pool.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.event import AttendanceStatus, Event, Visibility, ensure_events
from ..models.feed import FeedKind
from ..models.gateway import CandidateFilter, EventGateway
from .fetch import fetch_or_fail

logger = logging.getLogger(__name__)


def build_candidate_filter(
    feed_kind: FeedKind,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
    viewer_id: Optional[str] = None,
) -> CandidateFilter:
    """Query predicate for the feed's candidate pool."""
    if feed_kind == FeedKind.BRIDGING:
        return CandidateFilter(
            visibility=Visibility.PUBLIC,
            min_date=now,
            order_by="created_at",
            ascending=False,
            limit=config.bridging_pool_size,
        )
    return CandidateFilter(
        visibility=None,
        viewer_id=viewer_id,
        min_date=now,
        order_by="event_date",
        ascending=True,
        limit=config.personalized_pool_size,
    )


def viewer_can_see(event: Event, viewer_id: str) -> bool:
    """Public events, or private events the viewer created or was approved to attend."""
    if not event.is_private:
        return True
    if event.creator_id == viewer_id:
        return True
    return any(
        a.user_id == viewer_id and a.status == AttendanceStatus.APPROVED
        for a in event.attendees
    )


def _visible_candidates(events: List[Event], viewer_id: str) -> List[Event]:
    """Drop private events the viewer has no access to, keeping order."""
    visible = [ev for ev in events if viewer_can_see(ev, viewer_id)]
    hidden = len(events) - len(visible)
    if hidden:
        logger.debug("[candidate_pool] PRIVATE_HIDDEN viewer=%s hidden=%d", viewer_id, hidden)
    return visible


async def get_candidate_pool(
    viewer_id: str,
    feed_kind: FeedKind,
    gateway: EventGateway,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Event]:
    """
    Fetch the candidate pool for a feed, in the order later ties must keep.

    The gateway applies the filter, ordering and limit; the order it returns is
    the tie-break order for the ranker.
    """
    candidate_filter = build_candidate_filter(feed_kind, now, config, viewer_id)
    events = await fetch_or_fail(
        "fetch_candidate_events",
        gateway.fetch_candidate_events(candidate_filter),
        ensure_events,
    )
    return _visible_candidates(events, viewer_id)
