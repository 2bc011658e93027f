"""Events domain - rehearsals and gigs, and the past-event sweep."""

from .cleanup import (
    DirectDeleteSweeper,
    EventSweeper,
    RemoteFunctionSweeper,
    cleanup_past_events,
    get_cleanup_cutoff,
    get_sweeper,
)
from .crud import create_event, list_events
from .models import Event

__all__ = [
    "DirectDeleteSweeper",
    "Event",
    "EventSweeper",
    "RemoteFunctionSweeper",
    "cleanup_past_events",
    "create_event",
    "get_cleanup_cutoff",
    "get_sweeper",
    "list_events",
]
