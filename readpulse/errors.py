"""
Domain exceptions raised by the session and analytics core.

The HTTP layer maps each one onto a status code; the core itself never
deals in status codes beyond carrying them.
"""
from typing import Any


class ReadPulseError(Exception):
    """Base exception for all domain errors"""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ReadPulseError):
    """Raised when a referenced resource does not exist"""

    status_code = 404

    def __init__(self, resource: str = "Resource", details: dict[str, Any] | None = None):
        super().__init__(f"{resource} not found", details)


class ForbiddenError(ReadPulseError):
    """Raised when the requester does not own the resource"""

    status_code = 403


class ValidationError(ReadPulseError):
    """Raised when page or time bounds are violated"""

    status_code = 400


class ConfigurationError(ReadPulseError):
    """Raised when a timezone identifier is not a known IANA zone"""

    status_code = 400


class UnauthorizedError(ReadPulseError):
    """Raised when the requesting user cannot be identified"""

    status_code = 401


class ConflictError(ReadPulseError):
    """Raised when a record with the same identity already exists"""

    status_code = 409
