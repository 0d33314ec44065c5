"""
Ranking configuration — candidate pool sizes and scoring constants.

RankingConfig defaults are the production values. The server may pass a dict
(e.g. from a JSON file at RANKING_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RankingConfig(BaseModel):
    """Configuration for the event feed ranking pipeline."""

    # -------------------------------------------------------------------------
    # Candidate Pool
    # -------------------------------------------------------------------------

    # Max upcoming events considered for the For You feed (ordered by event date).
    personalized_pool_size: int = 20

    # Max upcoming public events considered for Explore (ordered by newest first).
    bridging_pool_size: int = 30

    # -------------------------------------------------------------------------
    # Relevance Scoring (For You)
    # score = follow_bonus? + tag_match_weight * |matching tags| + freshness_bonus?
    # -------------------------------------------------------------------------

    # Added when the viewer follows the event's creator.
    follow_bonus: int = 10
    # Added per distinct tag shared with the viewer's interests. Uncapped.
    tag_match_weight: int = 5

    # -------------------------------------------------------------------------
    # Freshness (both feeds)
    # -------------------------------------------------------------------------

    # Added when the event was created less than freshness_window_hours ago.
    freshness_bonus: int = 3
    freshness_window_hours: float = 24.0

    # -------------------------------------------------------------------------
    # Bridging Scoring (Explore)
    # Branches are checked in order; only the first match contributes.
    # -------------------------------------------------------------------------

    # Exactly one familiar tag plus at least one novel tag.
    bridge_single_familiar_bonus: int = 15
    # Exactly two familiar tags plus at least one novel tag.
    bridge_double_familiar_bonus: int = 10
    # No familiar tags, at least one novel tag.
    bridge_all_novel_bonus: int = 5
    # Applied to events the viewer already liked. Keeps them in the feed, sorted last.
    already_liked_penalty: int = -100

    @model_validator(mode="after")
    def pool_sizes_positive(self):
        if self.personalized_pool_size <= 0 or self.bridging_pool_size <= 0:
            raise ValueError(
                "Candidate pool sizes must be positive, got "
                f"personalized={self.personalized_pool_size} bridging={self.bridging_pool_size}"
            )
        if self.already_liked_penalty > 0:
            raise ValueError(
                f"already_liked_penalty must not be positive, got {self.already_liked_penalty}"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "candidate_pool" in config_dict:
            cp = config_dict["candidate_pool"]
            if "personalized" in cp:
                flat["personalized_pool_size"] = cp["personalized"]
            if "bridging" in cp:
                flat["bridging_pool_size"] = cp["bridging"]
        if "relevance" in config_dict:
            flat.update(config_dict["relevance"])
        if "freshness" in config_dict:
            fr = config_dict["freshness"]
            if "bonus" in fr:
                flat["freshness_bonus"] = fr["bonus"]
            if "window_hours" in fr:
                flat["freshness_window_hours"] = fr["window_hours"]
        if "bridging" in config_dict:
            flat.update(config_dict["bridging"])
        # Flat keys are accepted as-is
        flat.update({k: v for k, v in config_dict.items() if k in cls.model_fields})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
