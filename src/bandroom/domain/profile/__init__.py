"""Profile domain - member details and notification preferences."""

from .models import NotificationPreferences, UserProfile
from .service import (
    ProfileNotFound,
    get_user_profile,
    update_avatar,
    update_user_profile,
    validate_profile,
)

__all__ = [
    "NotificationPreferences",
    "ProfileNotFound",
    "UserProfile",
    "get_user_profile",
    "update_avatar",
    "update_user_profile",
    "validate_profile",
]
