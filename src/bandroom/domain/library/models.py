"""
Song library domain models.

Track is the transient shape of a catalog entry during import; Song is a
persisted library row owned by a band.
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple


class Track(NamedTuple):
    """A catalog track as returned by the playlist lookup.

    Exists only in memory between fetch and merge.
    """
    id: str
    name: str
    artists: Tuple[str, ...] = ()  # In catalog order
    external_url: Optional[str] = None  # open.spotify.com link

    @property
    def first_artist(self) -> str:
        """The artist a Song is attributed to (other artists are dropped)."""
        return self.artists[0] if self.artists else ""


class Song(NamedTuple):
    """A persisted song in a band's library."""
    band_id: str
    title: str
    artist: str
    spotify_link: Optional[str] = None
    song_sheet_path: Optional[str] = None  # Storage path of attached sheet
    created_by: Optional[str] = None
    created_at: Optional[str] = None  # ISO timestamp
    id: Optional[str] = None  # Assigned by the store

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Song":
        """Build a Song from a `songs` table row."""
        return cls(
            band_id=row.get("band_id"),
            title=row.get("title", ""),
            artist=row.get("artist", ""),
            spotify_link=row.get("spotify_link"),
            song_sheet_path=row.get("song_sheet_path"),
            created_by=row.get("created_by"),
            created_at=row.get("created_at"),
            id=row.get("id"),
        )


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging catalog tracks into a band library."""

    added: int
    skipped: int

    def summary(self) -> str:
        """User-facing one-liner."""
        message = f"Successfully imported {self.added} songs"
        if self.skipped > 0:
            message += f" ({self.skipped} duplicates skipped)"
        return message


class SetlistEntry(NamedTuple):
    """A song's slot in a setlist. Positions run 0..n-1 without gaps."""
    song_id: str
    position: int
    notes: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "SetlistEntry":
        return cls(
            song_id=row["song_id"],
            position=row.get("position", 0),
            notes=row.get("notes") or None,
            id=row.get("id"),
        )


class Setlist(NamedTuple):
    """The ordered songs planned for one event."""
    id: str
    event_id: str
    created_by: Optional[str] = None
    entries: Tuple[SetlistEntry, ...] = ()
