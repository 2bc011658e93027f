from typing import Optional

from fastapi import Depends, Header, HTTPException

from bandroom.core.config import Config, load_config
from bandroom.core.exceptions import Unauthenticated
from bandroom.core.session import BandContext, create_supabase_client, session_from_token


def get_config() -> Config:
    """FastAPI dependency for configuration."""
    return load_config()


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_context(
    authorization: Optional[str] = Header(None),
    config: Config = Depends(get_config),
) -> BandContext:
    """FastAPI dependency: data client scoped to the caller's session.

    A fresh client per request keeps one user's token from leaking into
    another request.
    """
    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        client = create_supabase_client(config)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))

    try:
        session = session_from_token(client, token)
    except Unauthenticated as e:
        raise HTTPException(status_code=401, detail=str(e))

    return BandContext(client=client, config=config, session=session)
