"""Band membership queries."""

from typing import Any, Dict, List

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import Client

BAND_MEMBERS_TABLE = "band_members"
LEADER_ROLE = "leader"


def check_user_is_leader(client: Client, user_id: str) -> bool:
    """True if the user leads at least one band.

    Store errors are logged and treated as "not a leader".
    """
    try:
        response = (
            client.table(BAND_MEMBERS_TABLE)
            .select("role")
            .eq("user_id", user_id)
            .eq("role", LEADER_ROLE)
            .execute()
        )
    except (APIError, httpx.HTTPError) as e:
        logger.error(f"Error checking user role for {user_id}: {e}")
        return False

    return bool(response.data)


def get_band_members(client: Client, band_id: str) -> List[Dict[str, Any]]:
    """Membership rows (user_id, role, joined_at) for a band, oldest first."""
    response = (
        client.table(BAND_MEMBERS_TABLE)
        .select("user_id, role, joined_at")
        .eq("band_id", band_id)
        .order("joined_at")
        .execute()
    )
    return response.data or []
