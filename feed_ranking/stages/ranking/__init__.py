"""
Feed scoring and ranking.

Public API: score_candidates, rank_candidates.
- core: scorer selection and the stable sort.
- Submodules: relevance (For You), bridging (Explore).
"""

from .bridging import bridge_bonus, bridging_score, split_tags
from .core import rank_candidates, score_candidates
from .relevance import matching_tag_count, relevance_score

__all__ = [
    "bridge_bonus",
    "bridging_score",
    "matching_tag_count",
    "rank_candidates",
    "relevance_score",
    "score_candidates",
    "split_tags",
]
