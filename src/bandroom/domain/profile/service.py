"""
Profile service: read and update the signed-in member's profile.

Profiles live in the `users` table, keyed by the auth user ID.
"""

from loguru import logger

from bandroom.core.exceptions import BandroomError
from bandroom.core.session import BandContext

from .models import UserProfile

USERS_TABLE = "users"

MAX_NAME_LENGTH = 100
MAX_INSTRUMENTS = 20
MAX_INSTRUMENT_LENGTH = 50


class ProfileNotFound(BandroomError):
    """Raised when the signed-in user has no profile row."""

    pass


def get_user_profile(ctx: BandContext) -> UserProfile:
    """Load the current user's profile.

    Raises:
        Unauthenticated: No session
        ProfileNotFound: No `users` row for the session's user
    """
    session = ctx.require_session()

    response = (
        ctx.client.table(USERS_TABLE)
        .select("*")
        .eq("id", session.user_id)
        .limit(1)
        .execute()
    )
    rows = response.data or []
    if not rows:
        logger.warning(f"No profile found for user {session.user_id}")
        raise ProfileNotFound("No profile found")
    return UserProfile.from_row(rows[0])


def validate_profile(profile: UserProfile) -> None:
    """Check editable fields before a write.

    Raises:
        ValueError: Blank or overlong name, too many instruments, or an
            instrument that is not a short string
    """
    name = (profile.full_name or "").strip()
    if not name:
        raise ValueError("Full name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"Full name must be at most {MAX_NAME_LENGTH} characters")

    if len(profile.instruments) > MAX_INSTRUMENTS:
        raise ValueError(f"At most {MAX_INSTRUMENTS} instruments can be listed")
    for instrument in profile.instruments:
        if not isinstance(instrument, str) or len(instrument) > MAX_INSTRUMENT_LENGTH:
            raise ValueError(f"Invalid instrument name: {instrument!r}")


def update_user_profile(ctx: BandContext, profile: UserProfile) -> UserProfile:
    """Save name, instruments and notification preferences.

    Email and ID are never written; the session decides whose row changes.
    The name is stored trimmed.

    Raises:
        Unauthenticated: No session
        ValueError: Invalid fields (nothing is written)
        ProfileNotFound: The update matched no row
    """
    validate_profile(profile)
    session = ctx.require_session()

    response = (
        ctx.client.table(USERS_TABLE)
        .update(
            {
                "name": profile.full_name.strip(),
                "instruments": profile.instruments,
                "notification_pref": profile.notification_preferences.to_json(),
            }
        )
        .eq("id", session.user_id)
        .execute()
    )
    rows = response.data or []
    if not rows:
        raise ProfileNotFound("Failed to update profile")

    logger.info(f"Updated profile for user {session.user_id}")
    return UserProfile.from_row(rows[0])


def update_avatar(ctx: BandContext) -> None:
    """Avatars are not stored in the users table."""
    raise NotImplementedError("Avatar updates are not supported")
