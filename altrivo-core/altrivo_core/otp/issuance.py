"""
OTP Issuance
============
Generates a code, mails it, and persists it once delivery is confirmed.
"""

from typing import Any, Dict, Optional

import structlog

from altrivo_core.config import BrandConfig, OTPConfig
from altrivo_core.mail import Mailer
from altrivo_core.metrics import OTP_DELIVERY_FAILURES, OTP_ISSUED
from altrivo_core.store import ExpiringStore

from .exceptions import DeliveryError
from .generator import generate_otp
from .models import OTP_MAIL_SUBJECT, OTPKeys, OTPTemplate

logger = structlog.get_logger(__name__)


def build_template_data(
    name: str,
    code: str,
    config: OTPConfig,
    brand: BrandConfig,
) -> Dict[str, Any]:
    """Template model shared by every OTP mail."""
    return {
        "name": name,
        "logoUrl": brand.logo_url,
        "companyName": brand.company_name,
        "otpCode": code,
        "expiryMinutes": config.expiry_minutes,
        "supportEmail": brand.support_email,
        "discordUrl": brand.discord_url,
        "githubUrl": brand.github_url,
        "twitterUrl": brand.twitter_url,
    }


async def issue(
    store: ExpiringStore,
    mailer: Mailer,
    name: str,
    email: str,
    template: str = OTPTemplate.USER_ACTIVATION.value,
    config: Optional[OTPConfig] = None,
    brand: Optional[BrandConfig] = None,
) -> str:
    """
    Issue a new challenge for ``email``.

    The code is stored (overwriting any previous one and its failed
    attempts) and the cooldown armed only after the mailer confirms delivery.

    Returns:
        The issued code

    Raises:
        DeliveryError: if the mail was not delivered; nothing is stored
    """
    config = config or OTPConfig()
    brand = brand or BrandConfig()
    keys = OTPKeys(email)

    code = generate_otp()
    result = await mailer.send(
        email,
        OTP_MAIL_SUBJECT,
        template,
        build_template_data(name, code, config, brand),
    )

    if not result.success:
        OTP_DELIVERY_FAILURES.labels(template=template).inc()
        logger.error(
            "OTP delivery failed",
            email=email,
            template=template,
            error_code=result.error_code,
            error=result.error_message,
        )
        raise DeliveryError()

    await store.set(keys.code, code, config.code_ttl)
    # Failures against the previous code do not carry over
    await store.delete(keys.attempts)
    await store.set(keys.cooldown, "true", config.cooldown_ttl)

    OTP_ISSUED.labels(template=template).inc()
    logger.info(
        "OTP issued",
        email=email,
        template=template,
        message_id=result.message_id,
        expires_in=config.code_ttl,
    )
    return code
