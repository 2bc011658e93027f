"""Event setlist endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from bandroom.core.session import BandContext
from bandroom.domain.library import Setlist, get_setlist, save_setlist

from ..deps import get_context
from ..schemas import SetlistEntryInfo, SetlistInfo, SetlistRequest

router = APIRouter()


def setlist_to_info(setlist: Setlist) -> SetlistInfo:
    return SetlistInfo(
        id=setlist.id,
        event_id=setlist.event_id,
        created_by=setlist.created_by,
        entries=[
            SetlistEntryInfo(song_id=e.song_id, position=e.position, notes=e.notes)
            for e in setlist.entries
        ],
    )


@router.get("/events/{event_id}/setlist", response_model=SetlistInfo)
def get_event_setlist(event_id: str, ctx: BandContext = Depends(get_context)):
    setlist = get_setlist(ctx.client, event_id)
    if setlist is None:
        raise HTTPException(status_code=404, detail="No setlist for this event")
    return setlist_to_info(setlist)


@router.put("/events/{event_id}/setlist", response_model=SetlistInfo)
def put_event_setlist(
    event_id: str, request: SetlistRequest, ctx: BandContext = Depends(get_context)
):
    """Replace the setlist; songs are stored in the order given."""
    songs = [(song.song_id, song.notes) for song in request.songs]
    return setlist_to_info(save_setlist(ctx, event_id, songs))
