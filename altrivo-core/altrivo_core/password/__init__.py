"""
Password Hashing
================
Async-safe password hashing using Argon2id, with bcrypt verification for
accounts created by the previous auth service.
"""

from .hasher import get_cached_hasher
from .async_ops import hash_password, verify_password

__all__ = [
    "get_cached_hasher",
    "hash_password",
    "verify_password",
]
