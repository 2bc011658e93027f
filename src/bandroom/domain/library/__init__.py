"""Library domain - a band's shared song collection.

This domain handles:
- Track and Song data models
- Song storage operations
- Spotify playlist import with duplicate skipping
- Event setlists
"""

from .import_playlist import import_spotify_playlist
from .merge import merge_tracks
from .models import MergeResult, Setlist, SetlistEntry, Song, Track
from .setlists import get_setlist, save_setlist
from .songs import (
    create_song,
    delete_song,
    find_songs,
    insert_song,
    list_songs,
    update_song,
)

__all__ = [
    # Models
    "MergeResult",
    "Setlist",
    "SetlistEntry",
    "Song",
    "Track",
    # Import
    "import_spotify_playlist",
    "merge_tracks",
    # Setlists
    "get_setlist",
    "save_setlist",
    # Storage
    "create_song",
    "delete_song",
    "find_songs",
    "insert_song",
    "list_songs",
    "update_song",
]
