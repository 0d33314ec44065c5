"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from feed_ranking import RankingConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("json", "supabase")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "json" (local file) | "supabase"
    data_source: str = "json"
    # When data_source=json: file with events, event_likes, event_attendees, follows, profiles
    events_json_path: Optional[Path] = None
    # When data_source=supabase
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    # Optional JSON file overriding ranking constants (see RankingConfig.from_dict)
    ranking_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or "json"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            events_json_path=_path_env("EVENTS_JSON_PATH", base_dir / "data" / "events.json"),
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_key=os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
            ranking_config_path=_path_env("RANKING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source not in DATA_SOURCES:
            errors.append(
                f"DATA_SOURCE must be one of {', '.join(DATA_SOURCES)}, got {self.data_source!r}"
            )

        if self.data_source == "json":
            if not self.events_json_path or not self.events_json_path.exists():
                errors.append(f"Events JSON not found: {self.events_json_path}")

        if self.data_source == "supabase":
            if not self.supabase_url:
                errors.append("SUPABASE_URL is required when DATA_SOURCE=supabase")
            if not self.supabase_key:
                errors.append("SUPABASE_KEY (or SUPABASE_SERVICE_ROLE_KEY) is required when DATA_SOURCE=supabase")

        if self.ranking_config_path and not self.ranking_config_path.exists():
            errors.append(f"Ranking config not found: {self.ranking_config_path}")

        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """Ranking constants: defaults merged with RANKING_CONFIG_PATH when set."""
        if not self.ranking_config_path:
            return RankingConfig()
        with open(self.ranking_config_path) as f:
            return RankingConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
