"""
OTP Service
===========
Send and check paths over one injected store and mailer.
"""

from typing import Optional

from altrivo_core.config import BrandConfig, OTPConfig
from altrivo_core.mail import Mailer
from altrivo_core.store import ExpiringStore

from .issuance import issue
from .models import OTPTemplate
from .restrictions import check_restrictions
from .throttle import track_request
from .verification import verify


class OTPService:
    """
    Email OTP issuance and verification.

    Usage:
        service = OTPService(RedisStore.from_config(), TemplateMailProvider())

        await service.request_otp("Ada", "ada@example.com")
        await service.verify_otp("ada@example.com", "4821")
    """

    def __init__(
        self,
        store: ExpiringStore,
        mailer: Mailer,
        config: Optional[OTPConfig] = None,
        brand: Optional[BrandConfig] = None,
    ):
        self.store = store
        self.mailer = mailer
        self.config = config or OTPConfig()
        self.brand = brand or BrandConfig()

    async def request_otp(
        self,
        name: str,
        email: str,
        template: str = OTPTemplate.USER_ACTIVATION.value,
    ) -> None:
        """
        Gate, count and issue a code for ``email``.

        Raises:
            RestrictionError: lockout, spam-lock or cooldown in effect
            DeliveryError: the mail was not delivered
        """
        await check_restrictions(self.store, email)
        await track_request(self.store, email, self.config)
        await issue(
            self.store,
            self.mailer,
            name,
            email,
            template=template,
            config=self.config,
            brand=self.brand,
        )

    async def verify_otp(self, email: str, code: str) -> None:
        """
        Consume the active challenge for ``email``.

        Raises:
            VerifyError: EXPIRED, INCORRECT or LOCKED_OUT
        """
        await verify(self.store, email, code, self.config)
