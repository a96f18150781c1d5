"""Tests for the Redis wrapper and settings helpers."""

from unittest.mock import AsyncMock, patch

import pytest

from app.domain.prompts.cache import TenantOverrideCache
from app.infrastructure.redis import RedisClient
from app.settings import get_async_database_url


class TestRedisClient:
    """RedisClient behavior with and without a connection."""

    @pytest.mark.asyncio
    async def test_disabled_client_is_noop(self):
        client = RedisClient(enabled=False)
        await client.connect()

        assert client.enabled is False
        assert await client.get_json("k") is None
        assert await client.set_json("k", {"a": 1}) is True
        assert await client.delete("k") == 0

    @pytest.mark.asyncio
    async def test_failed_connection_disables_client(self):
        fake = AsyncMock()
        fake.ping.side_effect = ConnectionError("refused")
        with patch("app.infrastructure.redis.aioredis.from_url", return_value=fake):
            client = RedisClient(url="redis://nowhere:6379/0", enabled=True)
            await client.connect()

        assert client.enabled is False

    @pytest.mark.asyncio
    async def test_json_round_trip_with_ttl(self):
        fake = AsyncMock()
        with patch("app.infrastructure.redis.aioredis.from_url", return_value=fake):
            client = RedisClient(enabled=True)
            await client.connect()

        await client.set_json("k", {"tool_rules": ["a"]}, ttl=30)
        fake.setex.assert_awaited_once_with("k", 30, '{"tool_rules": ["a"]}')

        fake.get.return_value = '{"tool_rules": ["a"]}'
        assert await client.get_json("k") == {"tool_rules": ["a"]}

        await client.disconnect()
        fake.aclose.assert_awaited_once()
        assert client.enabled is False

    @pytest.mark.asyncio
    async def test_override_cache_over_disabled_redis_always_misses(self):
        cache = TenantOverrideCache(RedisClient(enabled=False), ttl_seconds=10)
        await cache.set(1, {"tool_rules": ["a"]})
        assert await cache.get(1) is None


class TestDatabaseUrl:
    """Async driver URL normalization."""

    def test_postgres_scheme_converted(self):
        assert get_async_database_url("postgres://u:p@db/app") == "postgresql+asyncpg://u:p@db/app"

    def test_postgresql_scheme_converted(self):
        assert (
            get_async_database_url("postgresql://u:p@db/app")
            == "postgresql+asyncpg://u:p@db/app"
        )

    def test_sslmode_stripped(self):
        assert (
            get_async_database_url("postgresql://u:p@db/app?sslmode=require")
            == "postgresql+asyncpg://u:p@db/app"
        )

    def test_async_url_unchanged(self):
        url = "postgresql+asyncpg://u:p@db/app"
        assert get_async_database_url(url) == url


def test_session_factory_bound_to_configured_engine():
    from app.persistence.database import AsyncSessionLocal, engine

    assert AsyncSessionLocal.kw["bind"] is engine
    assert engine.url.render_as_string(hide_password=False) == get_async_database_url()
