"""
Spotify catalog operations.

Playlist lookup for library import. Only the first page of tracks the
playlist endpoint returns is used; there is no pagination.
"""

import re
from typing import Any, Dict, List

import requests
from loguru import logger

from bandroom.core.config import SpotifyConfig
from bandroom.core.exceptions import (
    InvalidReference,
    UpstreamProtocolError,
    UpstreamUnavailable,
)

from ...models import Track
from . import auth

API_BASE = "https://api.spotify.com/v1"

PLAYLIST_MARKER = "/playlist/"
_PLAYLIST_URI = re.compile(r"^spotify:playlist:([A-Za-z0-9]+)$")


def extract_playlist_id(reference: str) -> str:
    """Extract the playlist ID from a share URL or spotify URI.

    Accepts ``https://open.spotify.com/playlist/<id>?si=...`` style URLs
    and ``spotify:playlist:<id>`` URIs.

    Raises:
        InvalidReference: If no playlist ID can be found
    """
    reference = (reference or "").strip()

    uri_match = _PLAYLIST_URI.match(reference)
    if uri_match:
        return uri_match.group(1)

    if PLAYLIST_MARKER not in reference:
        raise InvalidReference(f"Invalid playlist URL: {reference!r}")

    segment = reference.split(PLAYLIST_MARKER, 1)[1]
    playlist_id = re.split(r"[?#/]", segment, maxsplit=1)[0]
    if not playlist_id:
        raise InvalidReference(f"Invalid playlist URL: {reference!r}")

    return playlist_id


def _normalize_spotify_track(track: Dict[str, Any]) -> Track:
    """Convert a Spotify API track object to a Track.

    Raises:
        UpstreamProtocolError: If the object lacks a name or has malformed artists
    """
    if not isinstance(track, dict) or not isinstance(track.get("name"), str):
        raise UpstreamProtocolError("Playlist track entry has no name")

    artists = track.get("artists") or []
    if not isinstance(artists, list):
        raise UpstreamProtocolError("Playlist track entry has malformed artists")

    return Track(
        id=track.get("id") or "",
        name=track["name"],
        artists=tuple(
            a["name"] for a in artists if isinstance(a, dict) and a.get("name") is not None
        ),
        external_url=(track.get("external_urls") or {}).get("spotify"),
    )


def parse_playlist_response(data: Any) -> List[Track]:
    """Map a playlist lookup body (``tracks.items[].track``) to Tracks.

    Items whose track is null (removed from the catalog) are dropped.

    Raises:
        UpstreamProtocolError: If the body does not have the expected shape
    """
    try:
        items = data["tracks"]["items"]
    except (KeyError, TypeError) as e:
        raise UpstreamProtocolError("Playlist response has no tracks.items") from e

    if not isinstance(items, list):
        raise UpstreamProtocolError("Playlist response tracks.items is not a list")

    tracks = []
    for item in items:
        track = item.get("track") if isinstance(item, dict) else None
        if track is None:
            logger.debug("Skipping playlist item with no track (removed from catalog)")
            continue
        tracks.append(_normalize_spotify_track(track))
    return tracks


def get_playlist_tracks(
    token: str, playlist_id: str, timeout: float | None = None
) -> List[Track]:
    """Fetch a playlist's tracks with a bearer token.

    Raises:
        UpstreamUnavailable: Network failure or non-2xx status
        UpstreamProtocolError: Body is not JSON or has an unexpected shape
    """
    url = f"{API_BASE}/playlists/{playlist_id}"

    try:
        response = requests.get(
            url, headers={"Authorization": f"Bearer {token}"}, timeout=timeout
        )
    except requests.RequestException as e:
        logger.warning(f"Spotify playlist request failed: {e}")
        raise UpstreamUnavailable(f"Could not reach Spotify: {e}") from e

    if not response.ok:
        logger.warning(
            f"Spotify playlist lookup {playlist_id} returned {response.status_code}"
        )
        raise UpstreamUnavailable(
            f"Failed to fetch playlist ({response.status_code})",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamProtocolError("Playlist response is not JSON") from e

    tracks = parse_playlist_response(data)
    logger.debug(f"Fetched {len(tracks)} tracks for playlist {playlist_id}")
    return tracks


def import_playlist(reference: str, config: SpotifyConfig) -> List[Track]:
    """Resolve a playlist reference to its normalized track list.

    The reference is validated before any network call. Each call obtains a
    fresh client token.

    Raises:
        InvalidReference: Malformed reference (no network call made)
        UpstreamUnavailable: Token or playlist request failed
        UpstreamProtocolError: Unexpected response shape
    """
    playlist_id = extract_playlist_id(reference)
    token = auth.get_client_credentials_token(
        config.client_id, config.client_secret, timeout=config.request_timeout
    )
    return get_playlist_tracks(token, playlist_id, timeout=config.request_timeout)
