"""
Account Flows
=============
Registration and password recovery built on the OTP service.

Each method maps to one auth endpoint; HTTP parsing stays with the caller,
which passes the decoded request body.
"""

import re
from typing import Any, Dict, Mapping

import structlog

from altrivo_core.exceptions import (
    SamePasswordError,
    UserExistsError,
    UserNotFoundError,
    ValidationError,
)
from altrivo_core.otp import OTPService, OTPTemplate
from altrivo_core.password import hash_password, verify_password
from altrivo_core.users import User, UserDirectory

logger = structlog.get_logger(__name__)

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

USER_TYPES = ("user", "seller")


def validate_registration_data(data: Mapping[str, Any], user_type: str = "user") -> None:
    """
    Check a registration payload.

    Raises:
        ValidationError: on missing fields or a malformed email
    """
    if user_type not in USER_TYPES:
        raise ValidationError(f"Unknown user type: {user_type}")

    if not data.get("name") or not data.get("email") or not data.get("password"):
        raise ValidationError("Name, email, and password are required.")

    if user_type == "seller" and (not data.get("phone_number") or not data.get("country")):
        raise ValidationError("Phone number and country are required for sellers.")

    if not EMAIL_REGEX.match(str(data["email"])):
        raise ValidationError("Invalid email format!")


class AuthFlows:
    """Registration, verification and password reset for user accounts."""

    def __init__(self, otp: OTPService, users: UserDirectory):
        self.otp = otp
        self.users = users

    async def register_user(self, data: Mapping[str, Any]) -> Dict[str, str]:
        """Validate the payload and mail an activation code."""
        validate_registration_data(data, "user")
        name, email = data["name"], data["email"]

        if await self.users.find_by_email(email):
            raise UserExistsError()

        await self.otp.request_otp(name, email, OTPTemplate.USER_ACTIVATION.value)
        return {"message": "OTP sent to email. Please verify your account."}

    async def verify_user(self, data: Mapping[str, Any]) -> User:
        """Consume the activation code and create the account."""
        email = data.get("email")
        otp = data.get("otp")
        password = data.get("password")
        name = data.get("name")

        if not email or not otp or not password or not name:
            raise ValidationError("All fields are required!")

        if await self.users.find_by_email(email):
            raise UserExistsError()

        await self.otp.verify_otp(email, str(otp))

        password_hash = await hash_password(password)
        user = await self.users.create(name, email, password_hash)
        logger.info("User registered", user_id=user.id, email=email)
        return user

    async def forgot_password(self, email: str) -> Dict[str, str]:
        """Mail a password-reset code to an existing account."""
        if not email:
            raise ValidationError("Email is required!")

        user = await self.users.find_by_email(email)
        if not user:
            raise UserNotFoundError(user_type="user")

        await self.otp.request_otp(user.name, email, OTPTemplate.FORGOT_PASSWORD.value)
        return {"message": "OTP sent to email. Please verify your account."}

    async def verify_forgot_password(self, email: str, otp: str) -> Dict[str, str]:
        if not email or not otp:
            raise ValidationError("Email and OTP are required!")

        await self.otp.verify_otp(email, str(otp))
        return {"message": "OTP verified. You can now reset your password."}

    async def reset_password(self, email: str, new_password: str) -> Dict[str, str]:
        """Replace the password of an existing account."""
        if not email or not new_password:
            raise ValidationError("Email and new password are required!")

        user = await self.users.find_by_email(email)
        if not user:
            raise UserNotFoundError()

        if user.password and await verify_password(new_password, user.password):
            raise SamePasswordError()

        await self.users.update_password(email, await hash_password(new_password))
        logger.info("Password reset", user_id=user.id, email=email)
        return {"message": "Password reset successfully."}
