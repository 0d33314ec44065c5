"""Feed endpoints: For You (personalized) and Explore (bridging)."""

from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Query

from feed_ranking import FeedKind, InvalidFeedKind, rank

from ..models import ErrorResponse, FeedResponse
from ..state import get_state
from ..utils import to_event_card

router = APIRouter()

_ERROR_RESPONSES = {503: {"model": ErrorResponse, "description": "Data store unavailable"}}


def _resolve_viewer(viewer_id: Optional[str], header_viewer_id: Optional[str]) -> Optional[str]:
    """Query parameter wins over the X-Viewer-Id header set by the session layer."""
    for candidate in (viewer_id, header_viewer_id):
        if candidate and candidate.strip():
            return candidate.strip()
    return None


async def _build_feed(feed_kind: FeedKind, viewer_id: Optional[str]) -> FeedResponse:
    state = get_state()
    events = await rank(viewer_id, feed_kind, state.gateway, state.ranking_config)
    cards = [to_event_card(ev, feed_position=i) for i, ev in enumerate(events)]
    return FeedResponse(
        feed_kind=feed_kind.value,
        viewer_id=viewer_id,
        events=cards,
        count=len(cards),
    )


@router.get("/for-you", response_model=FeedResponse, responses=_ERROR_RESPONSES)
async def for_you_feed(
    viewer_id: Optional[str] = Query(None),
    x_viewer_id: Optional[str] = Header(None),
):
    """Personalized feed: followed creators, interest tags, fresh events."""
    return await _build_feed(FeedKind.PERSONALIZED, _resolve_viewer(viewer_id, x_viewer_id))


@router.get("/explore", response_model=FeedResponse, responses=_ERROR_RESPONSES)
async def explore_feed(
    viewer_id: Optional[str] = Query(None),
    x_viewer_id: Optional[str] = Header(None),
):
    """Bridging feed: public events mixing known interests with new topics."""
    return await _build_feed(FeedKind.BRIDGING, _resolve_viewer(viewer_id, x_viewer_id))


@router.get("/{feed_kind}", response_model=FeedResponse, responses=_ERROR_RESPONSES)
async def feed(
    feed_kind: str,
    viewer_id: Optional[str] = Query(None),
    x_viewer_id: Optional[str] = Header(None),
):
    """Feed by kind name: personalized or bridging."""
    try:
        kind = FeedKind.parse(feed_kind)
    except InvalidFeedKind as e:
        raise HTTPException(status_code=422, detail=str(e))
    return await _build_feed(kind, _resolve_viewer(viewer_id, x_viewer_id))
