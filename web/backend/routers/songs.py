"""Song library endpoints, including Spotify playlist import."""

from fastapi import APIRouter, Depends, HTTPException

from bandroom.core.session import BandContext
from bandroom.domain.library import (
    Song,
    create_song,
    delete_song,
    import_spotify_playlist,
    list_songs,
    update_song,
)

from ..deps import get_context
from ..schemas import (
    SongInfo,
    SongRequest,
    SpotifyImportRequest,
    SpotifyImportResponse,
)

router = APIRouter()


def song_to_info(song: Song) -> SongInfo:
    """Convert Song to the API response model."""
    return SongInfo(**song._asdict())


@router.get("/bands/{band_id}/songs", response_model=list[SongInfo])
def get_band_songs(band_id: str, ctx: BandContext = Depends(get_context)):
    return [song_to_info(song) for song in list_songs(ctx.client, band_id)]


@router.post("/bands/{band_id}/songs", response_model=SongInfo, status_code=201)
def add_song(
    band_id: str, request: SongRequest, ctx: BandContext = Depends(get_context)
):
    try:
        song = create_song(
            ctx.client,
            band_id,
            ctx.require_session().user_id,
            title=request.title,
            artist=request.artist,
            spotify_link=request.spotify_link,
            song_sheet_path=request.song_sheet_path,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if song is None:
        raise HTTPException(status_code=500, detail="Failed to add song")
    return song_to_info(song)


@router.put("/songs/{song_id}", response_model=SongInfo)
def edit_song(
    song_id: str, request: SongRequest, ctx: BandContext = Depends(get_context)
):
    try:
        song = update_song(
            ctx.client,
            song_id,
            title=request.title,
            artist=request.artist,
            spotify_link=request.spotify_link,
            song_sheet_path=request.song_sheet_path,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if song is None:
        raise HTTPException(status_code=404, detail="Song not found")
    return song_to_info(song)


@router.delete("/songs/{song_id}", status_code=204)
def remove_song(song_id: str, ctx: BandContext = Depends(get_context)):
    if not delete_song(ctx.client, song_id):
        raise HTTPException(status_code=404, detail="Song not found")


@router.post("/bands/{band_id}/spotify-import", response_model=SpotifyImportResponse)
def import_playlist(
    band_id: str, request: SpotifyImportRequest, ctx: BandContext = Depends(get_context)
):
    """Import a Spotify playlist; duplicates (same title and artist) are skipped.

    Catalog and reference errors are mapped by the app's error handler.
    """
    result = import_spotify_playlist(ctx, band_id, request.playlist_url)
    return SpotifyImportResponse(
        added=result.added, skipped=result.skipped, message=result.summary()
    )
