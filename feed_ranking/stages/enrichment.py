"""
Viewer-relative fields added after ranking: liked flag, like count, approved attendees.
"""

from typing import List

from ..models.event import Attendance, AttendanceStatus
from ..models.scoring import EnrichedEvent, ScoredEvent


def approved_attendee_count(attendees: List[Attendance]) -> int:
    """Attendance records with status approved; pending and declined do not count."""
    return sum(1 for a in attendees if a.status == AttendanceStatus.APPROVED)


def enrich(scored: ScoredEvent, viewer_id: str) -> EnrichedEvent:
    """Copy of the event with score and viewer-relative metrics. The source event is untouched."""
    event = scored.event
    return EnrichedEvent.model_validate({
        **event.model_dump(),
        "score": scored.score,
        "liked": any(like.user_id == viewer_id for like in event.likes),
        "like_count": len(event.likes),
        "approved_attendee_count": approved_attendee_count(event.attendees),
    })


def enrich_ranked(ranked: List[ScoredEvent], viewer_id: str) -> List[EnrichedEvent]:
    """Enrich every ranked event, keeping order."""
    return [enrich(s, viewer_id) for s in ranked]
