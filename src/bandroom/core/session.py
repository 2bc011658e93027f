"""
Hosted data/auth service client and per-call context.

Domain operations never reach for a global client: callers build a
BandContext (client + config + optional session) and pass it in.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger
from supabase import AuthError, Client, create_client

from .config import Config
from .exceptions import Unauthenticated


@dataclass(frozen=True)
class AuthSession:
    """An authenticated principal."""

    access_token: str
    user_id: str
    email: Optional[str] = None


@dataclass
class BandContext:
    """Client handle and session threaded through every operation."""

    client: Client
    config: Config
    session: Optional[AuthSession] = None

    def require_session(self) -> AuthSession:
        """Return the active session.

        Raises:
            Unauthenticated: If no session is attached
        """
        if self.session is None:
            raise Unauthenticated()
        return self.session


def create_supabase_client(config: Config) -> Client:
    """Create a data/auth client from configuration.

    Raises:
        ValueError: If the project URL or key is not configured
    """
    if not config.supabase.url or not config.supabase.key:
        raise ValueError(
            "Supabase is not configured. Set [supabase] url/key in config.toml "
            "or SUPABASE_URL / SUPABASE_KEY in the environment."
        )
    return create_client(config.supabase.url, config.supabase.key)


def sign_in(client: Client, email: str, password: str) -> AuthSession:
    """Sign in with email/password and return the resulting session.

    Raises:
        Unauthenticated: If credentials are missing or rejected
    """
    if not email or not password:
        raise Unauthenticated("Missing sign-in credentials (BANDROOM_EMAIL / BANDROOM_PASSWORD)")

    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
    except AuthError as e:
        logger.warning(f"Sign-in failed for {email}: {e}")
        raise Unauthenticated(f"Sign-in failed: {e}") from e

    if response.session is None or response.user is None:
        raise Unauthenticated("Sign-in returned no session")

    logger.info(f"Signed in as {response.user.id}")
    return AuthSession(
        access_token=response.session.access_token,
        user_id=response.user.id,
        email=response.user.email,
    )


def session_from_token(client: Client, access_token: str) -> AuthSession:
    """Validate a bearer token and scope the client's table calls to it.

    Raises:
        Unauthenticated: If the token is empty or rejected
    """
    if not access_token:
        raise Unauthenticated()

    try:
        response = client.auth.get_user(access_token)
    except AuthError as e:
        logger.debug(f"Rejected access token: {e}")
        raise Unauthenticated("Invalid or expired session") from e

    if response is None or response.user is None:
        raise Unauthenticated("Invalid or expired session")

    # Row-level security evaluates table calls as this user
    client.postgrest.auth(access_token)
    return AuthSession(
        access_token=access_token,
        user_id=response.user.id,
        email=response.user.email,
    )


def get_active_session(client: Client) -> Optional[AuthSession]:
    """Return the client's current session, or None if signed out."""
    try:
        session = client.auth.get_session()
    except AuthError as e:
        logger.debug(f"Could not read session: {e}")
        return None

    if session is None or session.user is None:
        return None
    return AuthSession(
        access_token=session.access_token,
        user_id=session.user.id,
        email=session.user.email,
    )
