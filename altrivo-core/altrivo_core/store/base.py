"""
Expiring Store Interface
========================
Key-value store with per-key time-to-live used by the OTP core.
"""

from typing import Optional, Protocol


class ExpiringStore(Protocol):
    """
    String key to string value mapping with autonomous expiry.

    Every method is a suspension point. Implementations must make
    ``increment`` and a multi-key ``delete`` atomic per call.
    """

    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        ...

    async def increment(self, key: str, ttl: int) -> int:
        """Increment and return the new value; TTL is set only on creation."""
        ...

    async def delete(self, *keys: str) -> int:
        ...

    async def ping(self) -> bool:
        ...
