"""Event endpoints and the past-event sweep."""

from fastapi import APIRouter, Depends, HTTPException

from bandroom.core.session import BandContext
from bandroom.domain.events import Event, cleanup_past_events, create_event, list_events

from ..deps import get_context
from ..schemas import CleanupResponse, EventInfo, EventRequest

router = APIRouter()


def event_to_info(event: Event) -> EventInfo:
    return EventInfo(**event._asdict())


@router.get("/bands/{band_id}/events", response_model=list[EventInfo])
def get_band_events(
    band_id: str, upcoming: bool = True, ctx: BandContext = Depends(get_context)
):
    events = list_events(ctx.client, band_id, upcoming_only=upcoming)
    return [event_to_info(event) for event in events]


@router.post("/bands/{band_id}/events", response_model=EventInfo, status_code=201)
def add_event(
    band_id: str, request: EventRequest, ctx: BandContext = Depends(get_context)
):
    try:
        event = create_event(
            ctx.client,
            band_id,
            ctx.require_session().user_id,
            title=request.title,
            event_date=request.date,
            start_time=request.start_time,
            event_type=request.event_type,
            location=request.location,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if event is None:
        raise HTTPException(status_code=500, detail="Failed to create event")
    return event_to_info(event)


@router.post("/events/cleanup", response_model=CleanupResponse)
def cleanup_events(ctx: BandContext = Depends(get_context)):
    """Delete events dated before yesterday. Failures are reported, not raised."""
    deleted = cleanup_past_events(ctx)
    return CleanupResponse(deleted_count=deleted, success=deleted is not None)
