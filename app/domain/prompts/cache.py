"""Explicit cache objects for prompt configuration."""

import copy
import logging
from typing import Any

from app.infrastructure.redis import RedisClient
from app.settings import settings

logger = logging.getLogger(__name__)


class DefaultConfigCache:
    """Process-wide cache of the platform default prompt config.

    Created by the hosting process and passed by reference to every
    ConfigStore. Filled on first use and invalidated after any admin write
    to the default config. Reads return copies so callers can't mutate the
    cached value.
    """

    def __init__(self) -> None:
        self._config: dict[str, Any] | None = None

    def get(self) -> dict[str, Any] | None:
        """Get the cached default config, or None if not loaded."""
        if self._config is None:
            return None
        return copy.deepcopy(self._config)

    def set(self, config: dict[str, Any]) -> None:
        """Store the default config."""
        self._config = copy.deepcopy(config)

    def invalidate(self) -> None:
        """Drop the cached config so the next read goes to storage."""
        self._config = None

    @property
    def is_warm(self) -> bool:
        return self._config is not None


class TenantOverrideCache:
    """Per-tenant override cache backed by Redis.

    Keys are scoped by tenant so one tenant's override can never be served
    to another. A no-op when Redis is disabled.
    """

    KEY_PREFIX = "prompt_override:tenant:"

    def __init__(self, redis: RedisClient, ttl_seconds: int | None = None) -> None:
        self.redis = redis
        self.ttl_seconds = ttl_seconds or settings.prompt_override_cache_ttl_seconds

    def _key(self, tenant_id: int) -> str:
        return f"{self.KEY_PREFIX}{tenant_id}"

    async def get(self, tenant_id: int) -> dict[str, Any] | None:
        """Get a cached override, or None on miss."""
        value = await self.redis.get_json(self._key(tenant_id))
        if isinstance(value, dict):
            return value
        return None

    async def set(self, tenant_id: int, override: dict[str, Any]) -> None:
        """Cache a tenant's override."""
        await self.redis.set_json(self._key(tenant_id), override, ttl=self.ttl_seconds)

    async def invalidate(self, tenant_id: int) -> None:
        """Drop a tenant's cached override."""
        await self.redis.delete(self._key(tenant_id))
