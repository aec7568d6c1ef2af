"""
Auth Service Exceptions
=======================
Base exception hierarchy for user-facing auth failures.

Every error raised by this library is recoverable and safe to show to the
end user. Internal state (counters, TTLs) never appears in a message.
"""

from typing import Any, Optional


class AuthServiceError(Exception):
    """Base exception for all user-facing auth failures."""

    code: str = "AUTH_ERROR"
    status_code: int = 400

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        payload = {
            "status": "error",
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(AuthServiceError):
    """Raised when request data is missing or malformed."""
    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid request data", details: Any = None):
        super().__init__(message, details)


class UserExistsError(ValidationError):
    """Raised when registering an email that already has an account."""
    code = "USER_EXISTS"

    def __init__(self, message: str = "User already exists with this email!"):
        super().__init__(message)


class UserNotFoundError(ValidationError):
    """Raised when the directory has no account for an email."""
    code = "USER_NOT_FOUND"

    def __init__(self, message: str = "User not found!", user_type: Optional[str] = None):
        if user_type:
            message = f"{user_type} not found with this email!"
        super().__init__(message)


class SamePasswordError(ValidationError):
    """Raised when a reset would keep the current password."""
    code = "SAME_PASSWORD"

    def __init__(self, message: str = "New password cannot be the same as the old password!"):
        super().__init__(message)
