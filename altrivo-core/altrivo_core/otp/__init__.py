"""
Email OTP Verification
======================
Single-use 4-digit codes with cooldown, request throttling and lockout.
"""

from .models import OTPKeys, OTPTemplate, OTP_MAIL_SUBJECT
from .exceptions import (
    RestrictionKind,
    VerifyKind,
    RestrictionError,
    VerifyError,
    DeliveryError,
)
from .generator import generate_otp, CODE_MIN, CODE_MAX
from .restrictions import check_restrictions
from .throttle import track_request
from .issuance import issue, build_template_data
from .verification import verify
from .service import OTPService

__all__ = [
    # Models
    "OTPKeys",
    "OTPTemplate",
    "OTP_MAIL_SUBJECT",
    # Exceptions
    "RestrictionKind",
    "VerifyKind",
    "RestrictionError",
    "VerifyError",
    "DeliveryError",
    # Generation
    "generate_otp",
    "CODE_MIN",
    "CODE_MAX",
    # Operations
    "check_restrictions",
    "track_request",
    "issue",
    "build_template_data",
    "verify",
    # Service
    "OTPService",
]
