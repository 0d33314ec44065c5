"""
Feed ranking errors.

DataAccessFailure is the only error that leaves rank(); callers render a retry
affordance for it. InvalidFeedKind is raised at the boundary when a feed name
cannot be resolved.
"""

from typing import Optional


class FeedError(Exception):
    """Base class for feed ranking errors."""


class DataAccessFailure(FeedError):
    """The data gateway could not return records required by a ranking request."""

    retryable = True

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Data access failed during {operation}{detail}")


class InvalidFeedKind(FeedError, ValueError):
    """Unknown feed kind name."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown feed kind: {value!r}")
