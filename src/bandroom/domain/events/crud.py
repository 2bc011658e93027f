"""Event storage operations."""

from datetime import date
from typing import List, Optional

from loguru import logger
from supabase import Client

from bandroom.utils.dates import format_date, get_today_string

from .models import Event

EVENTS_TABLE = "events"
EVENT_TYPES = ("rehearsal", "gig")


def list_events(
    client: Client, band_id: str, upcoming_only: bool = True, today: Optional[date] = None
) -> List[Event]:
    """A band's events ordered by date, then start time.

    Args:
        upcoming_only: Only events dated today or later
        today: Override for the local date (tests)
    """
    query = client.table(EVENTS_TABLE).select("*").eq("band_id", band_id)
    if upcoming_only:
        query = query.gte("date", get_today_string(today))
    response = query.order("date").order("start_time").execute()
    return [Event.from_row(row) for row in response.data or []]


def create_event(
    client: Client,
    band_id: str,
    actor_id: str,
    title: str,
    event_date: date,
    start_time: str,
    event_type: str = "rehearsal",
    location: Optional[str] = None,
) -> Optional[Event]:
    """Schedule an event for a band.

    Raises:
        ValueError: Blank title or unknown event type
    """
    if not title.strip():
        raise ValueError("Event title is required")
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Unknown event type {event_type!r}, expected one of {EVENT_TYPES}")

    response = (
        client.table(EVENTS_TABLE)
        .insert(
            {
                "band_id": band_id,
                "title": title.strip(),
                "date": format_date(event_date),
                "start_time": start_time,
                "event_type": event_type,
                "location": location or None,
                "created_by": actor_id,
            }
        )
        .execute()
    )
    rows = response.data or []
    logger.info(f"Created {event_type} '{title}' on {event_date} for band {band_id}")
    return Event.from_row(rows[0]) if rows else None
