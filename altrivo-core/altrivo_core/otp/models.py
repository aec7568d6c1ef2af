"""
OTP Models
==========
Store key namespace and template names for email OTP challenges.
"""

from dataclasses import dataclass
from enum import Enum


class OTPTemplate(str, Enum):
    """Mail templates that carry a verification code."""
    USER_ACTIVATION = "user-activation-mail"
    FORGOT_PASSWORD = "forgot-password"


OTP_MAIL_SUBJECT = "Verify Your Email"


@dataclass(frozen=True)
class OTPKeys:
    """All store keys scoped to one email address."""
    email: str

    @property
    def code(self) -> str:
        return f"otp:{self.email}"

    @property
    def cooldown(self) -> str:
        return f"otp_cooldown:{self.email}"

    @property
    def request_count(self) -> str:
        return f"otp_request_count:{self.email}"

    @property
    def spam_lock(self) -> str:
        return f"otp_spam_lock:{self.email}"

    @property
    def attempts(self) -> str:
        return f"otp_attempts:{self.email}"

    @property
    def lock(self) -> str:
        return f"otp_lock:{self.email}"
