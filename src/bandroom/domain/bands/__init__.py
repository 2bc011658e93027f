"""Bands domain - bands, membership and roles."""

from .crud import (
    add_band_member,
    create_band,
    get_band,
    get_member_role,
    invite_member,
    is_valid_email,
    join_band,
)
from .exceptions import AlreadyMember, BandNotFound, NotBandLeader, UserNotFound
from .members import LEADER_ROLE, check_user_is_leader, get_band_members
from .models import Band, BandMember

__all__ = [
    "AlreadyMember",
    "Band",
    "BandMember",
    "BandNotFound",
    "LEADER_ROLE",
    "NotBandLeader",
    "UserNotFound",
    "add_band_member",
    "check_user_is_leader",
    "create_band",
    "get_band",
    "get_band_members",
    "get_member_role",
    "invite_member",
    "is_valid_email",
    "join_band",
]
