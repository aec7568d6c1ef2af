"""
Restriction Gate
================
Blocking conditions checked before every issuance attempt.
"""

import structlog

from altrivo_core.metrics import record_blocked
from altrivo_core.store import ExpiringStore

from .exceptions import RestrictionError, RestrictionKind
from .models import OTPKeys

logger = structlog.get_logger(__name__)


async def check_restrictions(store: ExpiringStore, email: str) -> None:
    """
    Refuse issuance while a lockout, spam-lock or cooldown is active.

    Checked in that order on every call, first match wins. Read-only.

    Raises:
        RestrictionError: with the kind of the first active block
    """
    keys = OTPKeys(email)

    if await store.get(keys.lock):
        kind = RestrictionKind.LOCKED_OUT
    elif await store.get(keys.spam_lock):
        kind = RestrictionKind.SPAM_BLOCKED
    elif await store.get(keys.cooldown):
        kind = RestrictionKind.COOLDOWN_ACTIVE
    else:
        return

    record_blocked(kind.value)
    logger.info("OTP issuance restricted", email=email, kind=kind.value)
    raise RestrictionError(kind)
