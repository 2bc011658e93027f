"""Pytest configuration for backend tests.

Routes run against the in-memory data client from the package tests, with
the request context dependency overridden to a signed-in member.
"""

import sys
from pathlib import Path

import pytest

# Repo root for `web.backend`, package tests dir for the fake data client
repo_root = Path(__file__).parent.parent.parent.parent
for path in (repo_root, repo_root / "tests"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fastapi.testclient import TestClient  # noqa: E402
from supabase_fakes import FakeSupabase  # noqa: E402

from bandroom.core.config import Config, NotificationsConfig  # noqa: E402
from bandroom.core.session import AuthSession, BandContext  # noqa: E402
from web.backend.deps import get_context  # noqa: E402
from web.backend.main import app  # noqa: E402


@pytest.fixture
def fake_client():
    return FakeSupabase()


@pytest.fixture
def ctx(fake_client):
    config = Config(notifications=NotificationsConfig(enabled=False))
    config.supabase.url = "https://project.supabase.co"
    config.supabase.key = "anon-key"
    session = AuthSession(access_token="session-token", user_id="user-1", email="a@b.c")
    return BandContext(client=fake_client, config=config, session=session)


@pytest.fixture
def api(ctx):
    """TestClient whose requests run as user-1."""
    app.dependency_overrides[get_context] = lambda: ctx
    yield TestClient(app)
    app.dependency_overrides.clear()
