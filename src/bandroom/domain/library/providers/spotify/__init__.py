"""
Spotify catalog provider for Bandroom.

Client-credentials token issuance and playlist lookup for song import.
"""

from . import api, auth
from .api import extract_playlist_id, get_playlist_tracks, import_playlist
from .auth import get_client_credentials_token

__all__ = [
    "api",
    "auth",
    "extract_playlist_id",
    "get_client_credentials_token",
    "get_playlist_tracks",
    "import_playlist",
]
