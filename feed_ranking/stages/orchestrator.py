"""
Pipeline orchestrator — interest profile, candidate pool, scoring, ranking, enrichment.

The main entry point is rank, which returns the viewer's feed as EnrichedEvents in
display order. Each call is stateless; all inputs are fetched fresh.
"""

import asyncio
import logging
from datetime import datetime
from typing import FrozenSet, List, Optional, Tuple, Union

from ..models.config import RankingConfig, resolve_config
from ..models.event import ensure_follows
from ..models.feed import FeedKind
from ..models.gateway import EventGateway
from ..models.scoring import EnrichedEvent, InterestProfile, ScoringContext
from ..utils.scores import parse_timestamp, utc_now
from .candidate_pool import get_candidate_pool
from .enrichment import enrich_ranked
from .fetch import fetch_or_fail
from .interest_profile import build_interest_profile
from .ranking import rank_candidates, score_candidates

logger = logging.getLogger(__name__)


async def _following_ids(
    viewer_id: str,
    feed_kind: FeedKind,
    gateway: EventGateway,
) -> FrozenSet[str]:
    """Creators the viewer follows. Only the For You feed uses follows."""
    if feed_kind != FeedKind.PERSONALIZED:
        return frozenset()
    follows = await fetch_or_fail(
        "fetch_follows",
        gateway.fetch_follows(viewer_id),
        ensure_follows,
    )
    return frozenset(f.following_id for f in follows)


async def _gather_viewer_signals(
    viewer_id: str,
    feed_kind: FeedKind,
    gateway: EventGateway,
) -> Tuple[InterestProfile, FrozenSet[str]]:
    """Fetch interests and follows concurrently; both finish before scoring starts."""
    return await asyncio.gather(
        build_interest_profile(viewer_id, gateway),
        _following_ids(viewer_id, feed_kind, gateway),
    )


async def rank(
    viewer_id: Optional[str],
    feed_kind: Union[FeedKind, str],
    gateway: EventGateway,
    config: Optional[RankingConfig] = None,
    now: Optional[datetime] = None,
) -> List[EnrichedEvent]:
    """
    Build the ranked feed for a viewer.

    feed_kind is validated first: an unknown name raises InvalidFeedKind before any
    read. After that, no viewer yields an empty list and DataAccessFailure is the only
    error raised; no partial feed is returned when a fetch fails.
    """
    feed_kind = FeedKind.parse(feed_kind)
    if not viewer_id or not viewer_id.strip():
        logger.info("[feed] NO_VIEWER kind=%s returning empty feed", feed_kind.value)
        return []
    viewer_id = viewer_id.strip()
    config = resolve_config(config)
    now = parse_timestamp(now) if now is not None else utc_now()

    profile, following_ids = await _gather_viewer_signals(viewer_id, feed_kind, gateway)
    candidates = await get_candidate_pool(viewer_id, feed_kind, gateway, now, config)

    context = ScoringContext(
        viewer_id=viewer_id,
        interests=profile.tags,
        following_ids=following_ids,
        liked_event_ids=profile.liked_event_ids,
        now=now,
    )
    ranked = rank_candidates(score_candidates(feed_kind, candidates, context, config))
    feed = enrich_ranked(ranked, viewer_id)

    logger.info(
        "[feed] RANKED kind=%s viewer=%s interests=%d following=%d candidates=%d",
        feed_kind.value, viewer_id, len(profile.tags), len(following_ids), len(feed),
    )
    return feed
