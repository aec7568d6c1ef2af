"""
OTP Exceptions
==============
Restriction, verification and delivery failures raised by the OTP core.
"""

from enum import Enum
from typing import Optional

from altrivo_core.exceptions import AuthServiceError


class RestrictionKind(str, Enum):
    """Why a new code cannot be issued."""
    LOCKED_OUT = "LOCKED_OUT"
    SPAM_BLOCKED = "SPAM_BLOCKED"
    COOLDOWN_ACTIVE = "COOLDOWN_ACTIVE"


class VerifyKind(str, Enum):
    """Why a submitted code was rejected."""
    EXPIRED = "EXPIRED"
    INCORRECT = "INCORRECT"
    LOCKED_OUT = "LOCKED_OUT"


RESTRICTION_MESSAGES = {
    RestrictionKind.LOCKED_OUT: "Account locked due to multiple failed attempts! Try again after 30 minutes.",
    RestrictionKind.SPAM_BLOCKED: "Too many OTP requests! Please wait 1 hour before requesting again.",
    RestrictionKind.COOLDOWN_ACTIVE: "Please wait 1 minute before requesting a new OTP.",
}


class RestrictionError(AuthServiceError):
    """Raised when the restriction gate or request throttle blocks issuance."""

    def __init__(self, kind: RestrictionKind):
        self.kind = kind
        super().__init__(RESTRICTION_MESSAGES[kind])

    @property
    def code(self) -> str:
        return self.kind.value


class VerifyError(AuthServiceError):
    """Raised when a submitted code does not consume the active challenge."""

    def __init__(self, kind: VerifyKind, remaining: Optional[int] = None):
        self.kind = kind
        self.remaining = remaining

        if kind is VerifyKind.INCORRECT:
            message = f"Incorrect OTP. You have {remaining} attempt(s) left."
            details = {"remaining_attempts": remaining}
        elif kind is VerifyKind.LOCKED_OUT:
            message = "Too many failed attempts. Your account is locked for 30 minutes."
            details = None
        else:
            message = "Expired OTP! Please request a new one."
            details = None

        super().__init__(message, details)

    @property
    def code(self) -> str:
        return self.kind.value


class DeliveryError(AuthServiceError):
    """Raised when the verification mail could not be delivered."""
    code = "DELIVERY_FAILED"
    status_code = 503

    def __init__(self, message: str = "We could not send your verification code. Please try again."):
        super().__init__(message)
