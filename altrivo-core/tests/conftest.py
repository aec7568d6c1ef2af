"""
Shared fixtures for altrivo-core tests.
"""

import uuid
from typing import Dict, Optional

import pytest

from altrivo_core.config import BrandConfig, OTPConfig
from altrivo_core.mail import InMemoryMailer
from altrivo_core.otp import OTPService
from altrivo_core.store import InMemoryStore
from altrivo_core.users import User


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryUserDirectory:
    """Dict-backed user directory."""

    def __init__(self):
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(id=str(uuid.uuid4()), name=name, email=email, password=password_hash)
        self.users[email] = user
        return user

    async def update_password(self, email: str, password_hash: str) -> None:
        self.users[email].password = password_hash


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryStore(clock=clock)


@pytest.fixture
def mailer():
    return InMemoryMailer()


@pytest.fixture
def otp_config():
    return OTPConfig(atomic_counters=False)


@pytest.fixture
def brand():
    return BrandConfig(company_name="Altrivo", support_email="support@altrivo.test")


@pytest.fixture
def service(store, mailer, otp_config, brand):
    return OTPService(store, mailer, config=otp_config, brand=brand)


@pytest.fixture
def users():
    return InMemoryUserDirectory()
