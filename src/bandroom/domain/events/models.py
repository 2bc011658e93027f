"""Event domain models."""

from datetime import date
from typing import Any, Dict, NamedTuple, Optional

from bandroom.utils.dates import parse_date_string


class Event(NamedTuple):
    """A scheduled rehearsal or gig owned by a band."""
    band_id: str
    title: str
    date: date
    start_time: str  # HH:MM
    event_type: str = "rehearsal"  # 'rehearsal' or 'gig'
    location: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Event":
        """Build an Event from an `events` table row."""
        return cls(
            band_id=row.get("band_id"),
            title=row.get("title", ""),
            date=parse_date_string(row["date"]),
            start_time=row.get("start_time", ""),
            event_type=row.get("event_type", "rehearsal"),
            location=row.get("location"),
            created_by=row.get("created_by"),
            created_at=row.get("created_at"),
            id=row.get("id"),
        )
