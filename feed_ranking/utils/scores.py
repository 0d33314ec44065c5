"""
Score helpers — time and tag-set utilities used by the scorers and gateways.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional, Set, Union


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse an ISO timestamp (or pass a datetime through) as an aware UTC datetime."""
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hours_since(timestamp: datetime, now: datetime) -> float:
    """Hours elapsed between timestamp and now (negative if timestamp is in the future)."""
    return (now - timestamp).total_seconds() / 3600


def is_fresh(created_at: datetime, now: datetime, window_hours: float = 24.0) -> bool:
    """True if created_at lies less than window_hours before now."""
    return hours_since(created_at, now) < window_hours


def tag_set(tags: Optional[Iterable[str]]) -> Set[str]:
    """Deduplicated tag set; None means no tags."""
    return set(tags) if tags else set()
