"""Shared utilities for timestamps and tag sets."""

from .scores import hours_since, is_fresh, parse_timestamp, tag_set, utc_now

__all__ = [
    "hours_since",
    "is_fresh",
    "parse_timestamp",
    "tag_set",
    "utc_now",
]
