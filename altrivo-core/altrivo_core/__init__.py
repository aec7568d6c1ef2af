"""
Altrivo Core Library
====================
Email OTP verification and account flows for the Altrivo auth service.
"""

__version__ = "0.1.0"

# Configuration
from altrivo_core.config import OTPConfig, BrandConfig, MailConfig, RedisConfig

# Exceptions
from altrivo_core.exceptions import (
    AuthServiceError,
    ValidationError,
    UserExistsError,
    UserNotFoundError,
    SamePasswordError,
)

# Expiring Store
from altrivo_core.store import ExpiringStore, InMemoryStore, RedisStore

# Mail
from altrivo_core.mail import Mailer, SendResult, TemplateMailProvider, InMemoryMailer

# OTP
from altrivo_core.otp import (
    OTPService,
    OTPKeys,
    OTPTemplate,
    RestrictionKind,
    VerifyKind,
    RestrictionError,
    VerifyError,
    DeliveryError,
    check_restrictions,
    track_request,
    issue,
    verify,
    generate_otp,
)

# Users
from altrivo_core.users import User, UserDirectory, SQLUserDirectory

# Password Hashing
from altrivo_core.password import hash_password, verify_password

# Account Flows
from altrivo_core.flows import AuthFlows, validate_registration_data

# Logging
from altrivo_core.logging_config import setup_logging

__all__ = [
    # Configuration
    "OTPConfig",
    "BrandConfig",
    "MailConfig",
    "RedisConfig",
    # Exceptions
    "AuthServiceError",
    "ValidationError",
    "UserExistsError",
    "UserNotFoundError",
    "SamePasswordError",
    # Expiring Store
    "ExpiringStore",
    "InMemoryStore",
    "RedisStore",
    # Mail
    "Mailer",
    "SendResult",
    "TemplateMailProvider",
    "InMemoryMailer",
    # OTP
    "OTPService",
    "OTPKeys",
    "OTPTemplate",
    "RestrictionKind",
    "VerifyKind",
    "RestrictionError",
    "VerifyError",
    "DeliveryError",
    "check_restrictions",
    "track_request",
    "issue",
    "verify",
    "generate_otp",
    # Users
    "User",
    "UserDirectory",
    "SQLUserDirectory",
    # Password Hashing
    "hash_password",
    "verify_password",
    # Account Flows
    "AuthFlows",
    "validate_registration_data",
    # Logging
    "setup_logging",
]
