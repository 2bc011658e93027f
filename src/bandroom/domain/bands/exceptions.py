"""Band membership exceptions."""

from bandroom.core.exceptions import BandroomError


class BandNotFound(BandroomError):
    """Raised when a band ID matches no `bands` row."""

    pass


class UserNotFound(BandroomError):
    """Raised when an invite names an email with no account."""

    pass


class AlreadyMember(BandroomError):
    """Raised when adding a user who is already in the band."""

    pass


class NotBandLeader(BandroomError):
    """Raised when a member-only action needs the leader role."""

    pass
