"""Root and health endpoints."""

from fastapi import APIRouter

from feed_ranking import FeedKind

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Event Feed Ranking API",
        "version": "1.0.0",
        "gateway": state.gateway_name,
        "feeds": [k.value for k in FeedKind],
        "endpoints": {
            "feeds": ["/api/feed/for-you", "/api/feed/explore", "/api/feed/{feed_kind}"],
            "health": ["/api/health"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    ok, errors = state.config.validate()
    return {
        "status": "healthy" if ok else "degraded",
        "data_source": state.config.data_source,
        "gateway": state.gateway_name,
        "config_errors": errors,
    }
