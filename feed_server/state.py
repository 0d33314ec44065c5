"""Application state: event gateway and ranking config."""

import logging
from typing import Optional

from feed_ranking import EventGateway, RankingConfig

from .config import ServerConfig, get_config
from .services import JsonEventGateway, SupabaseEventGateway

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        gateway: Optional[EventGateway] = None,
        ranking_config: Optional[RankingConfig] = None,
    ):
        self.config = config
        self.gateway = gateway if gateway is not None else self._create_gateway(config)
        self.ranking_config = (
            ranking_config if ranking_config is not None else config.load_ranking_config()
        )
        logger.info("[startup] Event gateway: %s", type(self.gateway).__name__)

    def _create_gateway(self, config: ServerConfig) -> EventGateway:
        """Create the event gateway for the configured data source."""
        if config.data_source == "supabase":
            return SupabaseEventGateway(url=config.supabase_url, key=config.supabase_key)
        if config.events_json_path and config.events_json_path.exists():
            return JsonEventGateway.from_path(config.events_json_path)
        logger.warning(
            "[startup] Events JSON not found (%s); serving empty feeds",
            config.events_json_path,
        )
        return JsonEventGateway()

    @property
    def gateway_name(self) -> str:
        return type(self.gateway).__name__


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None resets it to be rebuilt from config)."""
    global _state
    _state = state
