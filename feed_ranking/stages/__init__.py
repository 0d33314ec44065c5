"""Pipeline stages: interest profile, candidate pool, ranking, enrichment, orchestration."""

from .candidate_pool import build_candidate_filter, get_candidate_pool, viewer_can_see
from .enrichment import approved_attendee_count, enrich, enrich_ranked
from .interest_profile import build_interest_profile, interest_tags
from .orchestrator import rank
from .ranking import bridging_score, rank_candidates, relevance_score, score_candidates

__all__ = [
    "approved_attendee_count",
    "bridging_score",
    "build_candidate_filter",
    "build_interest_profile",
    "enrich",
    "enrich_ranked",
    "get_candidate_pool",
    "interest_tags",
    "rank",
    "rank_candidates",
    "relevance_score",
    "score_candidates",
    "viewer_can_see",
]
