"""Tests for CLI command runners."""

from unittest.mock import patch

import httpx

from bandroom import cli
from bandroom.core.exceptions import UpstreamUnavailable
from bandroom.domain.library.models import MergeResult


def test_import_playlist_success(ctx):
    with patch("bandroom.domain.library.import_spotify_playlist",
               return_value=MergeResult(2, 1)) as run:
        assert cli.run_import_playlist(ctx, "band-1", "https://open.spotify.com/playlist/x") == 0
    run.assert_called_once_with(ctx, "band-1", "https://open.spotify.com/playlist/x")


def test_import_playlist_failure(ctx):
    with patch("bandroom.domain.library.import_spotify_playlist",
               side_effect=UpstreamUnavailable("down")):
        assert cli.run_import_playlist(ctx, "band-1", "https://open.spotify.com/playlist/x") == 1


def test_cleanup_exit_codes(ctx, anon_ctx, fake_client):
    fake_client.tables["events"] = [
        {"id": "e1", "band_id": "b", "title": "Old", "date": "2000-01-01", "start_time": "19:00"}
    ]
    assert cli.run_cleanup_events(ctx) == 0
    assert cli.run_cleanup_events(anon_ctx) == 1


def test_is_leader_defaults_to_self(ctx, fake_client):
    fake_client.tables["band_members"] = [{"band_id": "b", "user_id": "user-1", "role": "leader"}]
    assert cli.run_is_leader(ctx, None) == 0
    assert fake_client.calls[0][2] == [("eq", "user_id", "user-1"), ("eq", "role", "leader")]


def test_profile_missing(ctx):
    assert cli.run_profile(ctx) == 1


def test_import_playlist_transport_error(ctx):
    with patch("bandroom.domain.library.import_spotify_playlist",
               side_effect=httpx.ConnectError("down")):
        assert cli.run_import_playlist(ctx, "band-1", "https://open.spotify.com/playlist/x") == 1


def test_create_band(ctx, fake_client):
    assert cli.run_create_band(ctx, "Night Owls") == 0
    assert fake_client.rows("band_members")[0]["role"] == "leader"
    assert cli.run_create_band(ctx, " ") == 1
