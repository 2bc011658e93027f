"""
Merge imported catalog tracks into a band's song library.

A track is a duplicate when the band already has a song with the same
title and first-listed artist. Checks and inserts are issued one track at
a time; there is no locking, so two concurrent imports of overlapping
playlists into the same band can both insert the same song.

Tracks the catalog lists without an artist are left out: every library
song has a non-blank title and artist, whichever way it was added.
"""

from datetime import datetime, timezone
from typing import Iterable

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import Client

from .models import MergeResult, Song, Track
from .songs import find_songs, insert_song


def merge_tracks(
    client: Client, band_id: str, actor_id: str, tracks: Iterable[Track]
) -> MergeResult:
    """Insert the tracks that are not already in the band's library.

    Tracks are processed in input order. A failed insert, or a track with
    no title or artist, is logged and counts as neither added nor skipped.
    Failures of the duplicate check propagate.

    Args:
        client: Data client scoped to the importing user's session
        band_id: Band that owns the library
        actor_id: Importing user, stamped as created_by
        tracks: Normalized catalog tracks

    Returns:
        MergeResult with confirmed added and skipped counts
    """
    added = 0
    skipped = 0

    for track in tracks:
        artist = track.first_artist
        if not artist.strip() or not track.name.strip():
            logger.warning(f"Leaving out track {track.id or track.name!r}: no title or artist")
            continue

        existing = find_songs(client, band_id, track.name, artist)
        if existing:
            logger.debug(f"Skipping duplicate: {artist} - {track.name}")
            skipped += 1
            continue

        song = Song(
            band_id=band_id,
            title=track.name,
            artist=artist,
            spotify_link=track.external_url,
            created_by=actor_id,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        try:
            insert_song(client, song)
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Error adding song {artist} - {track.name}: {e}")
            continue

        added += 1

    logger.info(f"Merged tracks into band {band_id}: added={added}, skipped={skipped}")
    return MergeResult(added=added, skipped=skipped)
