"""
Redis Expiring Store
====================
Redis-backed expiring store using a Lua script for atomic counters.
"""

from typing import Optional

import redis.asyncio as redis
from redis.exceptions import NoScriptError
import structlog

from altrivo_core.config import RedisConfig

logger = structlog.get_logger(__name__)

# INCR and arm the TTL only when the key has none (freshly created)
INCREMENT_SCRIPT = """
local value = redis.call('INCR', KEYS[1])
if redis.call('TTL', KEYS[1]) < 0 then
    redis.call('EXPIRE', KEYS[1], ARGV[1])
end
return value
"""


class RedisStore:
    """
    Expiring store on top of an async Redis client.

    Store errors propagate to the caller; the OTP core never retries.
    """

    def __init__(self, redis_client):
        """
        Args:
            redis_client: Async Redis client (redis.asyncio.Redis)
        """
        self.redis = redis_client
        self._script_sha: Optional[str] = None

    @classmethod
    def from_config(cls, config: Optional[RedisConfig] = None) -> "RedisStore":
        config = config or RedisConfig()
        client = redis.from_url(
            config.url,
            decode_responses=True,
            socket_timeout=config.socket_timeout,
        )
        logger.info("Redis store initialized")
        return cls(client)

    async def _ensure_script(self) -> str:
        """Load Lua script into Redis if needed."""
        if self._script_sha is None:
            self._script_sha = await self.redis.script_load(INCREMENT_SCRIPT)
        return self._script_sha

    async def get(self, key: str) -> Optional[str]:
        value = await self.redis.get(key)
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self.redis.set(key, value, ex=ttl)

    async def increment(self, key: str, ttl: int) -> int:
        script_sha = await self._ensure_script()
        try:
            result = await self.redis.evalsha(script_sha, 1, key, ttl)
        except NoScriptError:
            # Server lost its script cache
            logger.warning("Increment script missing, reloading")
            self._script_sha = None
            script_sha = await self._ensure_script()
            result = await self.redis.evalsha(script_sha, 1, key, ttl)
        return int(result)

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        # Single DEL: all keys go together or not at all
        return int(await self.redis.delete(*keys))

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except redis.RedisError as e:
            logger.error("Redis ping failed", error=str(e))
            return False

    async def close(self) -> None:
        await self.redis.aclose()
