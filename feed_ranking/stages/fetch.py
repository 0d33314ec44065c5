"""
Gateway call wrapper: every read the pipeline makes goes through fetch_or_fail,
so any store error (or malformed row) reaches the caller as DataAccessFailure.
"""

import logging
from typing import Awaitable, Callable, List, Optional, TypeVar

from ..errors import DataAccessFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_or_fail(
    operation: str,
    call: Awaitable[List],
    convert: Optional[Callable[[List], T]] = None,
) -> T:
    """Await a gateway call and convert its rows; wrap failures as DataAccessFailure."""
    try:
        rows = await call
        rows = rows or []
        return convert(rows) if convert is not None else rows
    except DataAccessFailure:
        raise
    except Exception as e:
        logger.exception("[gateway] FETCH_FAILED op=%s", operation)
        raise DataAccessFailure(operation, e) from e
