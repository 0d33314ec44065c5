"""
Event model — typed representation of an event and its social records.

Used by candidate_pool, the scorers, and enrichment instead of raw rows.
Built from gateway dicts via Event.model_validate(d) or ensure_events().
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.scores import parse_timestamp


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class AttendanceStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


class Like(BaseModel):
    """
    A user's like on an event. Unique per (event_id, user_id).

    event_id may be empty when the like is embedded in its event's row.
    """

    model_config = ConfigDict(extra="ignore")

    event_id: str = ""
    user_id: str


class Follow(BaseModel):
    """Directed follow edge: follower_id follows following_id."""

    model_config = ConfigDict(extra="ignore")

    follower_id: str = ""
    following_id: str


class Attendance(BaseModel):
    """Attendance request for an event. Only approved records count as attendees."""

    model_config = ConfigDict(extra="ignore")

    event_id: str = ""
    user_id: str
    status: AttendanceStatus = AttendanceStatus.PENDING


class CreatorProfile(BaseModel):
    """Public profile of an event's creator, embedded for display."""

    model_config = ConfigDict(extra="allow")

    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class EventTags(BaseModel):
    """Tag-only projection of an event, as returned by fetch_events_by_ids."""

    model_config = ConfigDict(extra="ignore")

    id: str
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Event(BaseModel):
    """
    Event payload used across the pipeline stages.

    Candidate events carry their likes and attendees so later stages need no extra fetches.
    Extra columns from the data store are kept and passed through to the response.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    creator_id: str
    tags: List[str] = Field(default_factory=list)
    event_date: datetime
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime
    title: Optional[str] = ""
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    creator: Optional[CreatorProfile] = None
    likes: List[Like] = Field(default_factory=list)
    attendees: List[Attendance] = Field(default_factory=list)

    @field_validator("tags", "likes", "attendees", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("event_date", "created_at", mode="before")
    @classmethod
    def _as_utc(cls, value: Any) -> Any:
        if isinstance(value, (str, datetime)):
            return parse_timestamp(value)
        return value

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE


def ensure_events(events: List[Union[Dict[str, Any], "Event"]]) -> List["Event"]:
    """Convert list of dicts or Events to list of Event models for use in the pipeline."""
    return [
        Event.model_validate(e) if isinstance(e, dict) else e
        for e in events
    ]


def ensure_likes(items: List[Union[Dict[str, Any], "Like"]]) -> List["Like"]:
    """Convert list of dicts or Likes to list of Like models."""
    return [Like.model_validate(i) if isinstance(i, dict) else i for i in items]


def ensure_follows(items: List[Union[Dict[str, Any], "Follow"]]) -> List["Follow"]:
    """Convert list of dicts or Follows to list of Follow models."""
    return [Follow.model_validate(i) if isinstance(i, dict) else i for i in items]


def ensure_event_tags(items: List[Union[Dict[str, Any], "EventTags"]]) -> List["EventTags"]:
    """Convert list of dicts or EventTags to list of EventTags models."""
    return [EventTags.model_validate(i) if isinstance(i, dict) else i for i in items]
