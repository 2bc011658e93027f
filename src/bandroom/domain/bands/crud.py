"""
Band creation and membership writes.

A band's creator becomes its leader. Only a leader can invite others by
email; anyone holding the band's join link can add themselves as a member.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from supabase import Client

from bandroom.core.session import BandContext

from .exceptions import AlreadyMember, BandNotFound, NotBandLeader, UserNotFound
from .members import BAND_MEMBERS_TABLE, LEADER_ROLE
from .models import Band, BandMember

BANDS_TABLE = "bands"
USERS_TABLE = "users"
MEMBER_ROLE = "member"

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 254


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL.match(email)) and len(email) <= MAX_EMAIL_LENGTH


def get_band(client: Client, band_id: str) -> Band:
    """Raises BandNotFound if the ID matches nothing."""
    response = client.table(BANDS_TABLE).select("*").eq("id", band_id).limit(1).execute()
    rows = response.data or []
    if not rows:
        raise BandNotFound(f"Band {band_id} not found")
    return Band.from_row(rows[0])


def get_member_role(client: Client, band_id: str, user_id: str) -> Optional[str]:
    """The user's role in the band, or None if not a member."""
    response = (
        client.table(BAND_MEMBERS_TABLE)
        .select("role")
        .eq("band_id", band_id)
        .eq("user_id", user_id)
        .limit(1)
        .execute()
    )
    rows = response.data or []
    return rows[0]["role"] if rows else None


def add_band_member(
    client: Client, band_id: str, user_id: str, role: str = MEMBER_ROLE
) -> BandMember:
    """Add a user to a band.

    Raises:
        AlreadyMember: The user already has a membership row for this band
    """
    if get_member_role(client, band_id, user_id) is not None:
        raise AlreadyMember("This user is already a member of the band")

    response = (
        client.table(BAND_MEMBERS_TABLE)
        .insert(
            {
                "band_id": band_id,
                "user_id": user_id,
                "role": role,
                "joined_at": _now(),
            }
        )
        .execute()
    )
    logger.info(f"Added {user_id} to band {band_id} as {role}")
    return BandMember.from_row(response.data[0])


def create_band(ctx: BandContext, name: str) -> Band:
    """Create a band led by the signed-in user.

    Raises:
        Unauthenticated: No session
        ValueError: Blank name
    """
    session = ctx.require_session()
    name = name.strip()
    if not name:
        raise ValueError("Band name is required")

    response = (
        ctx.client.table(BANDS_TABLE)
        .insert({"id": str(uuid.uuid4()), "name": name, "created_by": session.user_id})
        .execute()
    )
    band = Band.from_row(response.data[0])

    add_band_member(ctx.client, band.id, session.user_id, role=LEADER_ROLE)
    logger.info(f"Created band '{name}' ({band.id})")
    return band


def invite_member(ctx: BandContext, band_id: str, email: str) -> BandMember:
    """Add an existing account to the band by email. Leader only.

    Raises:
        ValueError: Malformed email
        NotBandLeader: The signed-in user does not lead this band
        UserNotFound: No account uses this email
        AlreadyMember: The account is already in the band
    """
    session = ctx.require_session()
    email = email.strip().lower()
    if not is_valid_email(email):
        raise ValueError("Please enter a valid email address")

    if get_member_role(ctx.client, band_id, session.user_id) != LEADER_ROLE:
        raise NotBandLeader("You don't have permission to invite members to this band")

    response = (
        ctx.client.table(USERS_TABLE).select("id").eq("email", email).limit(1).execute()
    )
    rows = response.data or []
    if not rows:
        raise UserNotFound(f"No account found for {email}")

    return add_band_member(ctx.client, band_id, rows[0]["id"])


def join_band(ctx: BandContext, band_id: str) -> BandMember:
    """Add the signed-in user to a band through its join link.

    Raises:
        BandNotFound: Unknown band
        AlreadyMember: Already in the band
    """
    session = ctx.require_session()
    get_band(ctx.client, band_id)
    return add_band_member(ctx.client, band_id, session.user_id)
