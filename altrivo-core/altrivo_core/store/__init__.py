"""
Expiring Store
==============
Key-value stores with per-key TTL backing the OTP core.
"""

from .base import ExpiringStore
from .in_memory import InMemoryStore
from .redis_store import RedisStore, INCREMENT_SCRIPT

__all__ = [
    "ExpiringStore",
    "InMemoryStore",
    "RedisStore",
    "INCREMENT_SCRIPT",
]
