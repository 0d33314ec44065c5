"""Pure helpers: event card formatting."""

from typing import Optional

from feed_ranking import EnrichedEvent

from .models import CreatorInfo, EventCard


def to_event_card(ev: EnrichedEvent, feed_position: Optional[int] = None) -> EventCard:
    """Convert an EnrichedEvent from the ranking pipeline to the card the UI renders."""
    creator = ev.creator.model_dump() if ev.creator else None
    return EventCard(
        id=ev.id,
        creator_id=ev.creator_id,
        title=ev.title or "",
        description=ev.description,
        location=ev.location,
        image_url=ev.image_url,
        tags=list(ev.tags),
        event_date=ev.event_date.isoformat(),
        created_at=ev.created_at.isoformat(),
        visibility=ev.visibility.value,
        creator=CreatorInfo(**creator) if creator else None,
        is_liked=ev.liked,
        likes_count=ev.like_count,
        attendees_count=ev.approved_attendee_count,
        score=ev.score,
        feed_position=feed_position,
    )
