"""
Explore bridging score: favour events that mix a few familiar tags with new ones.

familiar = event tags the viewer is interested in; novel = the rest.
Branches, first match wins (novel must be non-empty for any of them):
    |familiar| == 1 -> bridge_single_familiar_bonus
    |familiar| == 2 -> bridge_double_familiar_bonus
    |familiar| == 0 -> bridge_all_novel_bonus
Three or more familiar tags, or no novel tags, earn nothing from this term.
Freshness adds freshness_bonus; an already-liked event gets already_liked_penalty
and stays in the feed.
"""

from typing import FrozenSet, Set, Tuple

from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.event import Event
from ...models.scoring import ScoringContext
from ...utils.scores import is_fresh, tag_set


def split_tags(event: Event, interests: FrozenSet[str]) -> Tuple[Set[str], Set[str]]:
    """(familiar, novel) over the event's distinct tags."""
    tags = tag_set(event.tags)
    return tags & interests, tags - interests


def bridge_bonus(familiar_count: int, novel_count: int, config: RankingConfig = DEFAULT_CONFIG) -> int:
    """Bonus for the familiar/novel mix."""
    if novel_count == 0:
        return 0
    if familiar_count == 1:
        return config.bridge_single_familiar_bonus
    if familiar_count == 2:
        return config.bridge_double_familiar_bonus
    if familiar_count == 0:
        return config.bridge_all_novel_bonus
    return 0


def bridging_score(
    event: Event,
    context: ScoringContext,
    config: RankingConfig = DEFAULT_CONFIG,
) -> int:
    familiar, novel = split_tags(event, context.interests)
    score = bridge_bonus(len(familiar), len(novel), config)
    if is_fresh(event.created_at, context.now, config.freshness_window_hours):
        score += config.freshness_bonus
    if event.id in context.liked_event_ids:
        score += config.already_liked_penalty
    return score
