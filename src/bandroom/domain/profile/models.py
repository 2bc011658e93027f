"""Member profile models."""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Stored keys (camelCase) -> attribute names
_PREF_KEYS = {
    "emailNotifications": "email_notifications",
    "practiceReminders": "practice_reminders",
    "newCollaborationRequests": "new_collaboration_requests",
    "messageNotifications": "message_notifications",
}


@dataclass
class NotificationPreferences:
    """Which notices a member wants. Everything is on by default."""

    email_notifications: bool = True
    practice_reminders: bool = True
    new_collaboration_requests: bool = True
    message_notifications: bool = True

    @classmethod
    def parse(cls, raw: Optional[str]) -> "NotificationPreferences":
        """Parse the stored JSON string; unreadable values give the defaults."""
        try:
            data = json.loads(raw) if raw else {}
        except (TypeError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()

        prefs = cls()
        for stored_key, attr in _PREF_KEYS.items():
            if stored_key in data:
                setattr(prefs, attr, bool(data[stored_key]))
        return prefs

    def to_json(self) -> str:
        values = asdict(self)
        return json.dumps({key: values[attr] for key, attr in _PREF_KEYS.items()})


@dataclass
class UserProfile:
    id: str
    email: str
    full_name: str
    instruments: List[str] = field(default_factory=list)
    notification_preferences: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "UserProfile":
        """Build a profile from a `users` table row."""
        return cls(
            id=row["id"],
            email=row.get("email", ""),
            full_name=row.get("name", ""),
            instruments=list(row.get("instruments") or []),
            notification_preferences=NotificationPreferences.parse(
                row.get("notification_pref")
            ),
            created_at=row.get("created_at"),
        )
