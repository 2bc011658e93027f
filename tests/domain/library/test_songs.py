"""Tests for song library storage operations."""

import pytest

from bandroom.domain.library import songs
from bandroom.domain.library.models import Song


@pytest.fixture
def library(fake_client):
    fake_client.tables["songs"] = [
        {"id": "s2", "band_id": "band-1", "title": "Zebra", "artist": "Z"},
        {"id": "s1", "band_id": "band-1", "title": "Apple", "artist": "A"},
        {"id": "s3", "band_id": "band-2", "title": "Other", "artist": "O"},
    ]
    return fake_client


def test_list_songs_scoped_and_sorted(library):
    result = songs.list_songs(library, "band-1")

    assert [s.title for s in result] == ["Apple", "Zebra"]
    assert isinstance(result[0], Song)


def test_find_songs_matches_exact_pair(library):
    assert songs.find_songs(library, "band-1", "Apple", "A") == [{"id": "s1"}]
    assert songs.find_songs(library, "band-1", "Apple", "B") == []
    assert songs.find_songs(library, "band-2", "Apple", "A") == []


def test_create_song_strips_and_stamps_creator(fake_client):
    song = songs.create_song(
        fake_client, "band-1", "user-9", "  Title ", " Artist ", spotify_link=""
    )

    assert song.title == "Title"
    assert song.artist == "Artist"
    assert song.spotify_link is None
    assert song.created_by == "user-9"
    assert song.id is not None


def test_create_song_does_not_dedupe(library):
    songs.create_song(library, "band-1", "user-1", "Apple", "A")

    assert len(songs.find_songs(library, "band-1", "Apple", "A")) == 2


def test_create_song_requires_title_and_artist(fake_client):
    with pytest.raises(ValueError):
        songs.create_song(fake_client, "band-1", "user-1", " ", "Artist")
    assert fake_client.calls == []


def test_update_song(library):
    song = songs.update_song(library, "s1", "Apricot", "A", spotify_link="https://x")

    assert song.title == "Apricot"
    assert song.spotify_link == "https://x"


def test_update_missing_song(library):
    assert songs.update_song(library, "nope", "T", "A") is None


def test_delete_song(library):
    assert songs.delete_song(library, "s1") is True
    assert songs.delete_song(library, "s1") is False
    assert [r["id"] for r in library.rows("songs")] == ["s2", "s3"]
