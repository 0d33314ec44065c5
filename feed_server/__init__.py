"""
Event Feed Ranking Server

Usage: uvicorn feed_server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import JsonEventGateway, SupabaseEventGateway
from .state import AppState, get_state, set_state

__all__ = [
    "app",
    "create_app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "AppState",
    "get_state",
    "set_state",
    "JsonEventGateway",
    "SupabaseEventGateway",
]
