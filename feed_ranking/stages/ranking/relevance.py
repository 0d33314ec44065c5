"""
For You relevance score: followed creator, shared interest tags, freshness.

Already-liked events are not penalized in this feed.
"""

from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.event import Event
from ...models.scoring import ScoringContext
from ...utils.scores import is_fresh, tag_set


def matching_tag_count(event: Event, context: ScoringContext) -> int:
    """Number of distinct event tags that are also viewer interests."""
    return len(tag_set(event.tags) & context.interests)


def relevance_score(
    event: Event,
    context: ScoringContext,
    config: RankingConfig = DEFAULT_CONFIG,
) -> int:
    """
    score = follow_bonus (creator followed)
          + tag_match_weight * |distinct matching tags|
          + freshness_bonus (created within the freshness window)
    """
    score = 0
    if event.creator_id in context.following_ids:
        score += config.follow_bonus
    score += config.tag_match_weight * matching_tag_count(event, context)
    if is_fresh(event.created_at, context.now, config.freshness_window_hours):
        score += config.freshness_bonus
    return score
