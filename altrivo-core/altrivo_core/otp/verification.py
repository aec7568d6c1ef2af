"""
OTP Verification
================
Consumes the active challenge or counts a failed attempt.

States per email: no challenge, active challenge, locked. A match returns
to no challenge; the failure after ``max_failed_attempts`` locks. A lock
only clears when its TTL runs out.
"""

import hmac
from typing import Optional

import structlog

from altrivo_core.config import OTPConfig
from altrivo_core.metrics import record_verification
from altrivo_core.store import ExpiringStore

from .exceptions import VerifyError, VerifyKind
from .models import OTPKeys

logger = structlog.get_logger(__name__)


async def verify(
    store: ExpiringStore,
    email: str,
    submitted: str,
    config: Optional[OTPConfig] = None,
) -> None:
    """
    Check ``submitted`` against the stored code for ``email``.

    Raises:
        VerifyError: EXPIRED when no challenge is active, INCORRECT with the
            remaining attempts on a mismatch, LOCKED_OUT on the mismatch
            that exceeds the attempt limit
    """
    config = config or OTPConfig()
    keys = OTPKeys(email)

    stored = await store.get(keys.code)
    if not stored:
        record_verification("expired")
        raise VerifyError(VerifyKind.EXPIRED)

    if hmac.compare_digest(stored.encode(), str(submitted).encode()):
        # One DEL for both keys
        await store.delete(keys.code, keys.attempts)
        record_verification("success")
        logger.info("OTP verified", email=email)
        return

    if config.atomic_counters:
        failures = await store.increment(keys.attempts, config.attempts_ttl)
        previous = failures - 1
    else:
        previous = int(await store.get(keys.attempts) or 0)

    if previous >= config.max_failed_attempts:
        await store.set(keys.lock, "locked", config.lock_ttl)
        await store.delete(keys.code, keys.attempts)
        record_verification("locked")
        logger.warning("OTP lockout engaged", email=email)
        raise VerifyError(VerifyKind.LOCKED_OUT)

    if not config.atomic_counters:
        await store.set(keys.attempts, str(previous + 1), config.attempts_ttl)

    # Mismatches still tolerated before the one that locks
    remaining = config.max_failed_attempts - (previous + 1)
    record_verification("incorrect")
    logger.info("Invalid OTP attempt", email=email, remaining=remaining)
    raise VerifyError(VerifyKind.INCORRECT, remaining=remaining)
