"""Shared fixtures: fake data client and a signed-in context."""

import sys
from pathlib import Path

import pytest

tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

from supabase_fakes import FakeSupabase  # noqa: E402

from bandroom.core.config import Config, NotificationsConfig  # noqa: E402
from bandroom.core.output import set_quiet_mode  # noqa: E402
from bandroom.core.session import AuthSession, BandContext  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_output():
    """Keep user-facing log() messages out of test output."""
    set_quiet_mode(True)
    yield
    set_quiet_mode(False)


@pytest.fixture
def config():
    """Config with notifications off and fake credentials."""
    config = Config(notifications=NotificationsConfig(enabled=False))
    config.spotify.client_id = "client-id"
    config.spotify.client_secret = "client-secret"
    config.supabase.url = "https://project.supabase.co"
    config.supabase.key = "anon-key"
    return config


@pytest.fixture
def fake_client():
    return FakeSupabase()


@pytest.fixture
def session():
    return AuthSession(access_token="session-token", user_id="user-1", email="a@b.c")


@pytest.fixture
def ctx(fake_client, config, session):
    return BandContext(client=fake_client, config=config, session=session)


@pytest.fixture
def anon_ctx(fake_client, config):
    return BandContext(client=fake_client, config=config, session=None)
