"""Bandroom exceptions for error handling."""

from typing import Optional


class BandroomError(Exception):
    """Base exception for Bandroom operations."""

    pass


class InvalidReference(BandroomError):
    """Raised when a playlist reference has no recognizable playlist ID."""

    pass


class UpstreamUnavailable(BandroomError):
    """Raised when an external service call fails or returns a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class UpstreamProtocolError(BandroomError):
    """Raised when an external service response does not have the expected shape."""

    pass


class Unauthenticated(BandroomError):
    """Raised when an operation needs a session and none is active."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No active session found")
