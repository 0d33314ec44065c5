"""
Scoring model — per-request context, scored candidates, and enriched output.

Contains:
- InterestProfile: tags derived from the viewer's likes (plus the liked ids)
- ScoringContext: everything a scorer needs besides the event itself
- ScoredEvent: an event with its integer score, consumed by the ranker
- EnrichedEvent: the event as handed to the presentation layer
"""

from datetime import datetime
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field

from .event import Event


class InterestProfile(BaseModel):
    """Viewer interests built fresh per request. Never persisted."""

    model_config = ConfigDict(frozen=True)

    tags: FrozenSet[str] = Field(default_factory=frozenset)
    liked_event_ids: FrozenSet[str] = Field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.tags


class ScoringContext(BaseModel):
    """
    Inputs shared by every candidate in one ranking request.

    now is captured once per request so all candidates see the same instant.
    """

    model_config = ConfigDict(frozen=True)

    viewer_id: str
    interests: FrozenSet[str] = Field(default_factory=frozenset)
    following_ids: FrozenSet[str] = Field(default_factory=frozenset)
    liked_event_ids: FrozenSet[str] = Field(default_factory=frozenset)
    now: datetime


class ScoredEvent(BaseModel):
    """An event with its feed score."""

    event: Event
    score: int


class EnrichedEvent(Event):
    """Event plus viewer-relative fields, in ranked order."""

    score: int
    liked: bool = False
    like_count: int = 0
    approved_attendee_count: int = 0
