"""
SQL User Directory
==================
SQLAlchemy-backed user directory.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import Mapped, mapped_column
import structlog

from altrivo_core.database import Base, session_scope

from .base import User

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRecord(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    def to_user(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            password=self.password,
            created_at=self.created_at,
        )


class SQLUserDirectory:
    """User directory over an async session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_email(self, email: str) -> Optional[User]:
        async with session_scope(self._session_factory) as db:
            result = await db.execute(select(UserRecord).where(UserRecord.email == email))
            record = result.scalar_one_or_none()
            return record.to_user() if record else None

    async def create(self, name: str, email: str, password_hash: str) -> User:
        async with session_scope(self._session_factory) as db:
            record = UserRecord(name=name, email=email, password=password_hash)
            db.add(record)
            await db.flush()
            user = record.to_user()

        logger.info("User created", user_id=user.id, email=email)
        return user

    async def update_password(self, email: str, password_hash: str) -> None:
        async with session_scope(self._session_factory) as db:
            await db.execute(
                update(UserRecord)
                .where(UserRecord.email == email)
                .values(password=password_hash, updated_at=_utcnow())
            )
        logger.info("User password updated", email=email)
