"""
Feed kinds — which scorer and candidate pool a ranking request uses.
"""

from enum import Enum
from typing import Union

from ..errors import InvalidFeedKind

# Presentation-layer names for the two feeds
_ALIASES = {
    "for-you": "personalized",
    "for_you": "personalized",
    "foryou": "personalized",
    "explore": "bridging",
}


class FeedKind(str, Enum):
    """personalized = For You (relevance); bridging = Explore (discovery)."""

    PERSONALIZED = "personalized"
    BRIDGING = "bridging"

    @classmethod
    def parse(cls, value: Union[str, "FeedKind"]) -> "FeedKind":
        """Resolve a feed kind from its name or a UI alias ("for-you", "explore")."""
        if isinstance(value, cls):
            return value
        key = (value or "").strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidFeedKind(value) from None
