"""
Main ranking orchestration: score every candidate with the feed's scorer, then sort.

Sort key is (-score, pool index), so equal scores keep candidate pool order
(event date ascending for For You, newest first for Explore).
Submodules used: relevance, bridging.
"""

import logging
from typing import Callable, Dict, List

from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.event import Event
from ...models.feed import FeedKind
from ...models.scoring import ScoredEvent, ScoringContext
from .bridging import bridging_score
from .relevance import relevance_score

logger = logging.getLogger(__name__)

Scorer = Callable[[Event, ScoringContext, RankingConfig], int]

SCORERS: Dict[FeedKind, Scorer] = {
    FeedKind.PERSONALIZED: relevance_score,
    FeedKind.BRIDGING: bridging_score,
}


def score_candidates(
    feed_kind: FeedKind,
    candidates: List[Event],
    context: ScoringContext,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[ScoredEvent]:
    """Score candidates in pool order."""
    scorer = SCORERS[feed_kind]
    return [
        ScoredEvent(event=ev, score=scorer(ev, context, config))
        for ev in candidates
    ]


def rank_candidates(scored: List[ScoredEvent]) -> List[ScoredEvent]:
    """Order by score descending; ties keep their input order."""
    indexed = sorted(
        enumerate(scored),
        key=lambda pair: (-pair[1].score, pair[0]),
    )
    ranked = [s for _, s in indexed]
    if ranked:
        logger.debug(
            "[ranking] top scores: %s",
            [(s.event.id, s.score) for s in ranked[:5]],
        )
    return ranked
