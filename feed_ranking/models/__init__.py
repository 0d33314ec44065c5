"""Data models for the feed ranking pipeline."""

from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .event import (
    Attendance,
    AttendanceStatus,
    CreatorProfile,
    Event,
    EventTags,
    Follow,
    Like,
    Visibility,
    ensure_event_tags,
    ensure_events,
    ensure_follows,
    ensure_likes,
)
from .feed import FeedKind
from .gateway import CandidateFilter, EventGateway
from .scoring import EnrichedEvent, InterestProfile, ScoredEvent, ScoringContext

__all__ = [
    "DEFAULT_CONFIG",
    "Attendance",
    "AttendanceStatus",
    "CandidateFilter",
    "CreatorProfile",
    "EnrichedEvent",
    "Event",
    "EventGateway",
    "EventTags",
    "FeedKind",
    "Follow",
    "InterestProfile",
    "Like",
    "RankingConfig",
    "ScoredEvent",
    "ScoringContext",
    "Visibility",
    "ensure_event_tags",
    "ensure_events",
    "ensure_follows",
    "ensure_likes",
    "resolve_config",
]
