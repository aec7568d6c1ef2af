"""
Async Password Hashing
======================
Argon2id hashing and verification off the event loop.

Accounts created before the move to Argon2id carry bcrypt hashes
(``$2a$``/``$2b$``/``$2y$``); those still verify.
"""

import asyncio

import bcrypt
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .hasher import get_cached_hasher

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


async def hash_password(password: str) -> str:
    """
    Hash a password using Argon2id.

    Raises:
        ValueError: if the password is empty
    """
    if not password:
        raise ValueError("Password cannot be empty")

    hasher = get_cached_hasher()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hasher.hash, password)


async def verify_password(password: str, hash: str) -> bool:
    """Verify a password against an Argon2id or legacy bcrypt hash."""
    if not password or not hash:
        return False

    loop = asyncio.get_running_loop()

    if hash.startswith("$argon2"):
        return await loop.run_in_executor(None, _verify_argon2, password, hash)
    if hash.startswith(BCRYPT_PREFIXES):
        return await loop.run_in_executor(None, _verify_bcrypt, password, hash)
    return False


def _verify_argon2(password: str, hash: str) -> bool:
    try:
        return get_cached_hasher().verify(hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def _verify_bcrypt(password: str, hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hash.encode("utf-8"))
    except ValueError:
        return False
