"""
Song library storage operations.

Thin wrappers over the `songs` table. All functions take the client
explicitly; row access is scoped by the session attached to it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from loguru import logger
from supabase import Client

from .models import Song

SONGS_TABLE = "songs"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def list_songs(client: Client, band_id: str) -> List[Song]:
    """All songs in a band's library, ordered by title."""
    response = (
        client.table(SONGS_TABLE)
        .select("*")
        .eq("band_id", band_id)
        .order("title")
        .execute()
    )
    return [Song.from_row(row) for row in response.data or []]


def find_songs(client: Client, band_id: str, title: str, artist: str) -> List[Dict[str, Any]]:
    """Rows in the band's library with exactly this title and artist.

    Returns:
        List of {"id": ...} rows (empty when the pair is new)
    """
    response = (
        client.table(SONGS_TABLE)
        .select("id")
        .eq("band_id", band_id)
        .eq("title", title)
        .eq("artist", artist)
        .execute()
    )
    return response.data or []


def insert_song(client: Client, song: Song) -> Optional[Song]:
    """Insert a song row and return it as stored.

    Raises:
        postgrest.exceptions.APIError: If the store rejects the row
    """
    row = {
        "band_id": song.band_id,
        "title": song.title,
        "artist": song.artist,
        "spotify_link": song.spotify_link,
        "song_sheet_path": song.song_sheet_path,
        "created_by": song.created_by,
        "created_at": song.created_at or _now_iso(),
    }
    response = client.table(SONGS_TABLE).insert(row).execute()
    rows = response.data or []
    return Song.from_row(rows[0]) if rows else None


def create_song(
    client: Client,
    band_id: str,
    actor_id: str,
    title: str,
    artist: str,
    spotify_link: Optional[str] = None,
    song_sheet_path: Optional[str] = None,
) -> Optional[Song]:
    """Add a song by hand. Does not check for duplicates.

    Raises:
        ValueError: If title or artist is blank
    """
    title = title.strip()
    artist = artist.strip()
    if not title or not artist:
        raise ValueError("Song title and artist are required")

    song = insert_song(
        client,
        Song(
            band_id=band_id,
            title=title,
            artist=artist,
            spotify_link=spotify_link or None,
            song_sheet_path=song_sheet_path,
            created_by=actor_id,
        ),
    )
    logger.info(f"Added song to band {band_id}: {artist} - {title}")
    return song


def update_song(
    client: Client,
    song_id: str,
    title: str,
    artist: str,
    spotify_link: Optional[str] = None,
    song_sheet_path: Optional[str] = None,
) -> Optional[Song]:
    """Update a song's editable fields.

    Returns:
        The updated Song, or None if no row matched
    """
    title = title.strip()
    artist = artist.strip()
    if not title or not artist:
        raise ValueError("Song title and artist are required")

    response = (
        client.table(SONGS_TABLE)
        .update(
            {
                "title": title,
                "artist": artist,
                "spotify_link": spotify_link or None,
                "song_sheet_path": song_sheet_path,
            }
        )
        .eq("id", song_id)
        .execute()
    )
    rows = response.data or []
    if not rows:
        logger.warning(f"Song {song_id} not found for update")
        return None
    return Song.from_row(rows[0])


def delete_song(client: Client, song_id: str) -> bool:
    """Delete a song. Returns True if a row was removed."""
    response = client.table(SONGS_TABLE).delete().eq("id", song_id).execute()
    deleted = bool(response.data)
    if deleted:
        logger.info(f"Deleted song {song_id}")
    return deleted
