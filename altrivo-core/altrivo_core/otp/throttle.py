"""
Request Throttle
================
Counts issuance attempts and escalates to a spam-lock.
"""

from typing import Optional

import structlog

from altrivo_core.config import OTPConfig
from altrivo_core.metrics import record_blocked
from altrivo_core.store import ExpiringStore

from .exceptions import RestrictionError, RestrictionKind
from .models import OTPKeys

logger = structlog.get_logger(__name__)


async def track_request(
    store: ExpiringStore,
    email: str,
    config: Optional[OTPConfig] = None,
) -> None:
    """
    Record one issuance attempt; the attempt after ``max_requests`` is refused.

    By default the counter is read then rewritten with a fresh window TTL,
    so every accepted request re-arms the full window. Two concurrent
    requests can read the same count and under-count; set
    ``OTPConfig.atomic_counters`` to count with a single store increment
    whose TTL is armed only when the counter is created.

    Raises:
        RestrictionError: SPAM_BLOCKED once the threshold is exceeded
    """
    config = config or OTPConfig()
    keys = OTPKeys(email)

    if config.atomic_counters:
        count = await store.increment(keys.request_count, config.request_window)
        exceeded = count > config.max_requests
    else:
        previous = int(await store.get(keys.request_count) or 0)
        exceeded = previous >= config.max_requests
        if not exceeded:
            await store.set(keys.request_count, str(previous + 1), config.request_window)

    if exceeded:
        await store.set(keys.spam_lock, "locked", config.spam_lock_ttl)
        await store.set(keys.request_count, "0", config.request_window)
        record_blocked(RestrictionKind.SPAM_BLOCKED.value)
        logger.warning("OTP spam lock engaged", email=email)
        raise RestrictionError(RestrictionKind.SPAM_BLOCKED)
