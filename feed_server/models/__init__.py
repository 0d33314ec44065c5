"""Pydantic request/response models for the API."""

from .common import CreatorInfo, EventCard
from .feed import ErrorResponse, FeedResponse

__all__ = [
    "CreatorInfo",
    "EventCard",
    "ErrorResponse",
    "FeedResponse",
]
