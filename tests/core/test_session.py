"""Tests for sign-in and bearer-token sessions."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from supabase import AuthError

from bandroom.core.config import Config
from bandroom.core.exceptions import Unauthenticated
from bandroom.core.session import (
    BandContext,
    create_supabase_client,
    get_active_session,
    session_from_token,
    sign_in,
)


def _auth_response(user_id="user-1", token="tok"):
    user = SimpleNamespace(id=user_id, email="a@b.c")
    return SimpleNamespace(user=user, session=SimpleNamespace(access_token=token))


def test_sign_in():
    client = MagicMock()
    client.auth.sign_in_with_password.return_value = _auth_response()

    session = sign_in(client, "a@b.c", "pw")

    assert session.user_id == "user-1"
    assert session.access_token == "tok"
    client.auth.sign_in_with_password.assert_called_once_with({"email": "a@b.c", "password": "pw"})


def test_sign_in_rejected():
    client = MagicMock()
    client.auth.sign_in_with_password.side_effect = AuthError("Invalid login credentials", None)

    with pytest.raises(Unauthenticated):
        sign_in(client, "a@b.c", "wrong")


def test_sign_in_without_credentials():
    client = MagicMock()
    with pytest.raises(Unauthenticated):
        sign_in(client, "", "")
    client.auth.sign_in_with_password.assert_not_called()


def test_session_from_token_scopes_table_calls():
    client = MagicMock()
    client.auth.get_user.return_value = _auth_response(user_id="user-7")

    session = session_from_token(client, "bearer")

    assert session.user_id == "user-7"
    assert session.access_token == "bearer"
    client.postgrest.auth.assert_called_once_with("bearer")


def test_session_from_token_without_user():
    client = MagicMock()
    client.auth.get_user.return_value = None

    with pytest.raises(Unauthenticated):
        session_from_token(client, "bearer")
    client.postgrest.auth.assert_not_called()


def test_require_session():
    ctx = BandContext(client=MagicMock(), config=Config())
    with pytest.raises(Unauthenticated, match="No active session found"):
        ctx.require_session()


def test_client_needs_url_and_key():
    with pytest.raises(ValueError):
        create_supabase_client(Config())


def test_active_session():
    client = MagicMock()
    client.auth.get_session.return_value = SimpleNamespace(
        access_token="tok", user=SimpleNamespace(id="user-1", email="a@b.c")
    )
    assert get_active_session(client).user_id == "user-1"

    client.auth.get_session.return_value = None
    assert get_active_session(client) is None
