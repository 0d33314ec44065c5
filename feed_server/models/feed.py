"""Feed-related Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel

from .common import EventCard


class FeedResponse(BaseModel):
    feed_kind: str
    viewer_id: Optional[str] = None
    events: List[EventCard]
    count: int


class ErrorResponse(BaseModel):
    detail: str
    retryable: bool = False
