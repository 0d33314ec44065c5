"""
Event Feed Ranking — FastAPI app factory.

Use: uvicorn feed_server.app:app
Or:  from feed_server import app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from feed_ranking import DataAccessFailure

from .config import get_config
from .models import ErrorResponse
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


async def _data_access_failure_handler(request: Request, exc: DataAccessFailure) -> JSONResponse:
    """Gateway failures become 503 so clients can offer a retry."""
    logger.warning("[feed] DATA_ACCESS_FAILURE path=%s op=%s", request.url.path, exc.operation)
    body = ErrorResponse(detail=str(exc), retryable=exc.retryable)
    return JSONResponse(status_code=503, content=body.model_dump())


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, error handling and startup."""
    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app = FastAPI(
        title="Event Feed Ranking API",
        description="For You and Explore event feeds ranked from likes, follows and tags",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DataAccessFailure, _data_access_failure_handler)
    register_routes(app)

    @app.on_event("startup")
    async def _startup_logging():
        state = get_state()
        ok, errors = state.config.validate()
        logger.info("Event Feed Ranking API starting...")
        logger.info("Data source: %s (%s)", state.config.data_source, state.gateway_name)
        for err in errors:
            logger.warning("[startup] config: %s", err)
        if ok:
            logger.info("[startup] Configuration valid")

    return app


app = create_app()
