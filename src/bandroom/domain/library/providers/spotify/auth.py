"""
Spotify client-credentials authentication.

Issues an app-level bearer token (no user login). Tokens are not cached:
each import re-authenticates.
"""

import base64
from typing import Optional

import requests
from loguru import logger

from bandroom.core.exceptions import UpstreamProtocolError, UpstreamUnavailable

TOKEN_URL = "https://accounts.spotify.com/api/token"


def _basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build the Basic auth header value for the token endpoint."""
    encoded = base64.b64encode(
        f"{client_id}:{client_secret}".encode("utf-8")
    ).decode("utf-8")
    return f"Basic {encoded}"


def get_client_credentials_token(
    client_id: str, client_secret: str, timeout: Optional[float] = None
) -> str:
    """Exchange the app credentials for a bearer token.

    Args:
        client_id: Spotify app client ID
        client_secret: Spotify app client secret
        timeout: Request timeout in seconds (None = no timeout)

    Returns:
        Access token string

    Raises:
        UpstreamUnavailable: Credentials missing, network failure or non-2xx status
        UpstreamProtocolError: Response is not JSON or has no access_token
    """
    if not client_id or not client_secret:
        logger.error("Spotify client credentials are not configured")
        raise UpstreamUnavailable(
            "Spotify credentials not configured (SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET)"
        )

    try:
        response = requests.post(
            TOKEN_URL,
            data={"grant_type": "client_credentials"},
            headers={
                "Authorization": _basic_auth_header(client_id, client_secret),
                "Content-Type": "application/x-www-form-urlencoded",
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning(f"Spotify token request failed: {e}")
        raise UpstreamUnavailable(f"Could not reach Spotify accounts service: {e}") from e

    if not response.ok:
        logger.warning(
            f"Spotify token request returned {response.status_code}: {response.text[:200]}"
        )
        raise UpstreamUnavailable(
            f"Spotify token request failed ({response.status_code})",
            status_code=response.status_code,
        )

    try:
        token_data = response.json()
    except ValueError as e:
        raise UpstreamProtocolError("Spotify token response is not JSON") from e

    access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
    if not access_token:
        raise UpstreamProtocolError("Spotify token response has no access_token")

    logger.debug(f"Obtained Spotify client token (expires_in={token_data.get('expires_in')})")
    return access_token
