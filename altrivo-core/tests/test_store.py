"""
Tests for the expiring stores.
"""

from unittest.mock import AsyncMock

import pytest


class TestInMemoryStore:
    """Tests for the in-memory store and its TTL handling."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, store):
        """Should return the stored value as text."""
        await store.set("otp:a@x.com", "4821", 300)

        assert await store.get("otp:a@x.com") == "4821"
        assert await store.get("otp:b@x.com") is None

    @pytest.mark.asyncio
    async def test_expiry(self, store, clock):
        """Key should disappear once its TTL has elapsed."""
        await store.set("otp_cooldown:a@x.com", "true", 60)

        clock.advance(59)
        assert await store.get("otp_cooldown:a@x.com") == "true"

        clock.advance(1)
        assert await store.get("otp_cooldown:a@x.com") is None

    @pytest.mark.asyncio
    async def test_set_overwrites_value_and_ttl(self, store, clock):
        """A second set should replace the value and re-arm the TTL."""
        await store.set("k", "1", 10)
        clock.advance(8)
        await store.set("k", "2", 10)
        clock.advance(8)

        assert await store.get("k") == "2"

    @pytest.mark.asyncio
    async def test_increment_sets_ttl_only_on_creation(self, store, clock):
        """Increment should keep the TTL armed by the first increment."""
        assert await store.increment("counter", 100) == 1
        clock.advance(60)
        assert await store.increment("counter", 100) == 2

        clock.advance(40)
        assert await store.get("counter") is None
        assert await store.increment("counter", 100) == 1

    @pytest.mark.asyncio
    async def test_increment_existing_value(self, store):
        """Increment should continue from a value written with set."""
        await store.set("counter", "0", 100)

        assert await store.increment("counter", 5) == 1
        assert store.ttl("counter") == pytest.approx(100)

    @pytest.mark.asyncio
    async def test_delete_multiple(self, store):
        """Delete should remove every listed key and count live ones."""
        await store.set("a", "1", 10)
        await store.set("b", "2", 10)

        assert await store.delete("a", "b", "missing") == 2
        assert await store.get("a") is None
        assert await store.get("b") is None


class TestRedisStore:
    """Tests for the Redis store against a mocked client."""

    def _client(self):
        client = AsyncMock()
        client.script_load.return_value = "sha-1"
        return client

    @pytest.mark.asyncio
    async def test_set_uses_expiry(self):
        """Set should pass the TTL as EX seconds."""
        from altrivo_core.store import RedisStore

        client = self._client()
        store = RedisStore(client)

        await store.set("otp:a@x.com", "4821", 300)

        client.set.assert_awaited_once_with("otp:a@x.com", "4821", ex=300)

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self):
        """Get should return text even when the client returns bytes."""
        from altrivo_core.store import RedisStore

        client = self._client()
        client.get.return_value = b"4821"
        store = RedisStore(client)

        assert await store.get("otp:a@x.com") == "4821"

    @pytest.mark.asyncio
    async def test_increment_loads_script_once(self):
        """Increment should run the Lua script through EVALSHA."""
        from altrivo_core.store import RedisStore, INCREMENT_SCRIPT

        client = self._client()
        client.evalsha.side_effect = [1, 2]
        store = RedisStore(client)

        assert await store.increment("otp_attempts:a@x.com", 300) == 1
        assert await store.increment("otp_attempts:a@x.com", 300) == 2

        client.script_load.assert_awaited_once_with(INCREMENT_SCRIPT)
        client.evalsha.assert_awaited_with("sha-1", 1, "otp_attempts:a@x.com", 300)

    @pytest.mark.asyncio
    async def test_increment_reloads_flushed_script(self):
        """Should reload the script and retry when Redis reports NOSCRIPT."""
        from redis.exceptions import NoScriptError

        from altrivo_core.store import RedisStore, INCREMENT_SCRIPT

        client = self._client()
        client.script_load.side_effect = ["sha-1", "sha-2"]
        client.evalsha.side_effect = [1, NoScriptError("NOSCRIPT No matching script"), 2, 3]
        store = RedisStore(client)

        assert await store.increment("otp_attempts:a@x.com", 300) == 1
        assert await store.increment("otp_attempts:a@x.com", 300) == 2
        assert await store.increment("otp_attempts:a@x.com", 300) == 3

        assert client.script_load.await_count == 2
        client.script_load.assert_awaited_with(INCREMENT_SCRIPT)
        client.evalsha.assert_awaited_with("sha-2", 1, "otp_attempts:a@x.com", 300)

    @pytest.mark.asyncio
    async def test_delete_is_single_call(self):
        """Both keys should go in one DEL."""
        from altrivo_core.store import RedisStore

        client = self._client()
        client.delete.return_value = 2
        store = RedisStore(client)

        assert await store.delete("otp:a@x.com", "otp_attempts:a@x.com") == 2
        client.delete.assert_awaited_once_with("otp:a@x.com", "otp_attempts:a@x.com")

    @pytest.mark.asyncio
    async def test_delete_without_keys(self):
        """Delete with no keys should not reach Redis."""
        from altrivo_core.store import RedisStore

        client = self._client()
        store = RedisStore(client)

        assert await store.delete() == 0
        client.delete.assert_not_awaited()
