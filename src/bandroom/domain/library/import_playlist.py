"""Import orchestration: Spotify playlist into a band's song library."""

import httpx
from loguru import logger
from postgrest.exceptions import APIError

from bandroom.core.exceptions import BandroomError, InvalidReference
from bandroom.core.output import log
from bandroom.core.session import BandContext
from bandroom.notifications import notify_error, notify_success

from .merge import merge_tracks
from .models import MergeResult
from .providers import spotify


def import_spotify_playlist(
    ctx: BandContext, band_id: str, reference: str
) -> MergeResult:
    """Import every new track of a playlist into the band's library.

    Errors abort the import as a whole. Songs inserted before the failure
    stay in the library.

    Args:
        ctx: Client context; must carry a session
        band_id: Target band
        reference: Playlist share URL or spotify URI

    Returns:
        MergeResult with added/skipped counts

    Raises:
        Unauthenticated: No session (checked before any network call)
        InvalidReference: Empty or malformed reference
        UpstreamUnavailable / UpstreamProtocolError: Catalog failures
    """
    session = ctx.require_session()

    if not reference or not reference.strip():
        raise InvalidReference("Please enter a playlist URL")

    try:
        tracks = spotify.import_playlist(reference, ctx.config.spotify)
        logger.info(f"Importing {len(tracks)} tracks into band {band_id}")
        result = merge_tracks(ctx.client, band_id, session.user_id, tracks)
    except (BandroomError, APIError, httpx.HTTPError) as e:
        log(f"❌ Failed to import playlist: {e}", level="error")
        notify_error(ctx.config.notifications, "Failed to import playlist")
        raise

    log(f"✓ {result.summary()}", level="info")
    notify_success(ctx.config.notifications, result.summary())
    return result
