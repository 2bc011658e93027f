"""
Event setlists.

An event has at most one setlist. Saving replaces the whole song order:
existing entries are deleted and the new list is written with positions
renumbered from 0.
"""

from typing import Iterable, Optional, Tuple

from loguru import logger
from supabase import Client

from bandroom.core.session import BandContext

from .models import Setlist, SetlistEntry

SETLISTS_TABLE = "setlists"
SETLIST_SONGS_TABLE = "setlist_songs"


def _find_setlist_row(client: Client, event_id: str) -> Optional[dict]:
    response = (
        client.table(SETLISTS_TABLE).select("*").eq("event_id", event_id).limit(1).execute()
    )
    rows = response.data or []
    return rows[0] if rows else None


def _list_entries(client: Client, setlist_id: str) -> Tuple[SetlistEntry, ...]:
    response = (
        client.table(SETLIST_SONGS_TABLE)
        .select("id, song_id, position, notes")
        .eq("setlist_id", setlist_id)
        .order("position")
        .execute()
    )
    return tuple(SetlistEntry.from_row(row) for row in response.data or [])


def get_setlist(client: Client, event_id: str) -> Optional[Setlist]:
    """The event's setlist with entries in position order, or None."""
    row = _find_setlist_row(client, event_id)
    if row is None:
        return None
    return Setlist(
        id=row["id"],
        event_id=row["event_id"],
        created_by=row.get("created_by"),
        entries=_list_entries(client, row["id"]),
    )


def save_setlist(
    ctx: BandContext, event_id: str, songs: Iterable[Tuple[str, Optional[str]]]
) -> Setlist:
    """Replace an event's setlist with ``(song_id, notes)`` pairs in play order.

    Creates the setlist on first save. An empty list leaves an empty setlist.

    Raises:
        Unauthenticated: No session
    """
    session = ctx.require_session()
    client = ctx.client

    row = _find_setlist_row(client, event_id)
    if row is None:
        response = (
            client.table(SETLISTS_TABLE)
            .insert({"event_id": event_id, "created_by": session.user_id})
            .execute()
        )
        row = response.data[0]
    setlist_id = row["id"]

    client.table(SETLIST_SONGS_TABLE).delete().eq("setlist_id", setlist_id).execute()

    payload = [
        {
            "setlist_id": setlist_id,
            "song_id": song_id,
            "position": position,
            "notes": notes or None,
        }
        for position, (song_id, notes) in enumerate(songs)
    ]
    if payload:
        client.table(SETLIST_SONGS_TABLE).insert(payload).execute()

    logger.info(f"Saved setlist {setlist_id} for event {event_id} ({len(payload)} songs)")
    return Setlist(
        id=setlist_id,
        event_id=event_id,
        created_by=row.get("created_by"),
        entries=_list_entries(client, setlist_id),
    )
