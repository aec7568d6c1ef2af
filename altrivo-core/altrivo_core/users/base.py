"""
User Directory Interface
========================
Lookup/insert contract for persistent user accounts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol


@dataclass
class User:
    """Account record as seen by the auth flows."""
    id: str
    name: str
    email: str
    password: Optional[str] = None  # password hash
    created_at: Optional[datetime] = None


class UserDirectory(Protocol):
    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    async def create(self, name: str, email: str, password_hash: str) -> User:
        ...

    async def update_password(self, email: str, password_hash: str) -> None:
        ...
