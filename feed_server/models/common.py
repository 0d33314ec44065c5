"""Common Pydantic models shared across routes."""

from typing import List, Optional

from pydantic import BaseModel


class CreatorInfo(BaseModel):
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class EventCard(BaseModel):
    id: str
    creator_id: str
    title: str = ""
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    tags: List[str] = []
    event_date: str
    created_at: str
    visibility: str
    creator: Optional[CreatorInfo] = None
    is_liked: bool = False
    likes_count: int = 0
    attendees_count: int = 0
    score: int = 0
    feed_position: Optional[int] = None
