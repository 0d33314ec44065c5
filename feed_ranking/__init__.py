"""
Event Feed Ranking

Single entry point for the ranking package:
- models/: RankingConfig, Event, FeedKind, EnrichedEvent, EventGateway
- stages/: interest_profile, candidate_pool, ranking (relevance, bridging), enrichment, orchestrator
- errors: DataAccessFailure, InvalidFeedKind
"""

from .errors import DataAccessFailure, FeedError, InvalidFeedKind
from .models import (
    DEFAULT_CONFIG,
    CandidateFilter,
    EnrichedEvent,
    Event,
    EventGateway,
    FeedKind,
    RankingConfig,
    ScoredEvent,
    resolve_config,
)
from .stages import (
    build_interest_profile,
    get_candidate_pool,
    rank,
    rank_candidates,
    score_candidates,
)

__all__ = [
    "RankingConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
    "CandidateFilter",
    "EnrichedEvent",
    "Event",
    "EventGateway",
    "FeedKind",
    "ScoredEvent",
    "DataAccessFailure",
    "FeedError",
    "InvalidFeedKind",
    "build_interest_profile",
    "get_candidate_pool",
    "rank",
    "rank_candidates",
    "score_candidates",
]
