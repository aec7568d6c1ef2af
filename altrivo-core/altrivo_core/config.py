"""
Altrivo Core Configuration
==========================
Environment-driven settings for the OTP core and its collaborators.
"""

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class OTPConfig:
    """Thresholds and TTLs for OTP issuance and verification."""
    code_ttl: int = field(default_factory=lambda: _env_int("OTP_CODE_TTL", 300))  # 5 minutes
    cooldown_ttl: int = field(default_factory=lambda: _env_int("OTP_COOLDOWN_TTL", 60))
    request_window: int = field(default_factory=lambda: _env_int("OTP_REQUEST_WINDOW", 3600))
    spam_lock_ttl: int = field(default_factory=lambda: _env_int("OTP_SPAM_LOCK_TTL", 3600))
    attempts_ttl: int = field(default_factory=lambda: _env_int("OTP_ATTEMPTS_TTL", 300))
    lock_ttl: int = field(default_factory=lambda: _env_int("OTP_LOCK_TTL", 1800))  # 30 minutes
    max_requests: int = 2
    max_failed_attempts: int = 2
    atomic_counters: bool = field(
        default_factory=lambda: _env_bool("OTP_ATOMIC_COUNTERS", False)
    )

    @property
    def expiry_minutes(self) -> int:
        return self.code_ttl // 60


@dataclass
class BrandConfig:
    """Brand fields injected into every OTP mail template."""
    company_name: str = field(default_factory=lambda: os.environ.get("BRAND_NAME", "Altrivo"))
    logo_url: str = field(default_factory=lambda: os.environ.get("MAIL_LOGO_URL", ""))
    support_email: str = field(default_factory=lambda: os.environ.get("MAIL_SUPPORT", ""))
    discord_url: str = field(default_factory=lambda: os.environ.get("DISCORD_URL", ""))
    github_url: str = field(default_factory=lambda: os.environ.get("GITHUB_URL", ""))
    twitter_url: str = field(default_factory=lambda: os.environ.get("X_URL", ""))


@dataclass
class MailConfig:
    """Connection settings for the transactional mail API."""
    base_url: str = field(
        default_factory=lambda: os.environ.get("MAIL_API_URL", "https://api.postmarkapp.com")
    )
    api_token: str = field(default_factory=lambda: os.environ.get("MAIL_API_TOKEN", ""))
    sender: str = field(default_factory=lambda: os.environ.get("MAIL_SENDER", ""))
    timeout: float = 10.0


@dataclass
class RedisConfig:
    """Redis connection used as the expiring store."""
    url: str = field(
        default_factory=lambda: os.environ.get("REDIS_URL", "redis://localhost:6379/0")
    )
    socket_timeout: float = 5.0
