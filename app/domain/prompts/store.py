"""Loading and saving of the two prompt configuration layers."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.prompts.base_configs import get_hardcoded_default_config
from app.domain.prompts.cache import DefaultConfigCache, TenantOverrideCache
from app.persistence.repositories.platform_config_repository import PlatformConfigRepository
from app.persistence.repositories.tenant_prompt_config_repository import TenantPromptConfigRepository

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads the platform default and tenant overrides, with caching.

    Reads never raise: prompt generation runs on every conversation turn, so
    a storage failure degrades to the hardcoded default (or an empty
    override) instead. Writes propagate storage errors to the caller.
    """

    def __init__(
        self,
        session: AsyncSession,
        default_cache: DefaultConfigCache,
        override_cache: TenantOverrideCache | None = None,
    ):
        """Initialize the store.

        Args:
            session: Database session
            default_cache: Shared default-config cache owned by the host process
            override_cache: Optional per-tenant override cache
        """
        self.session = session
        self.default_cache = default_cache
        self.override_cache = override_cache
        self.platform_repo = PlatformConfigRepository(session)
        self.override_repo = TenantPromptConfigRepository(session)

    async def get_default_config(self) -> dict[str, Any]:
        """Get the platform default prompt config. Never returns None."""
        cached = self.default_cache.get()
        if cached is not None:
            return cached

        try:
            stored = await self.platform_repo.get_default_prompt_config()
        except Exception as e:
            # Not cached, so the next call retries storage
            logger.warning(
                f"Failed to load default prompt config, using hardcoded defaults: {e}"
            )
            return get_hardcoded_default_config()

        if isinstance(stored, dict) and stored:
            config = stored
        else:
            logger.info("No default prompt config stored, using hardcoded defaults")
            config = get_hardcoded_default_config()

        self.default_cache.set(config)
        return self.default_cache.get()

    async def get_override(self, tenant_id: int) -> dict[str, Any]:
        """Get a tenant's partial override; {} when nothing is customized."""
        if self.override_cache is not None:
            try:
                cached = await self.override_cache.get(tenant_id)
            except Exception as e:
                logger.warning(f"Override cache read failed: {e}", extra={"tenant_id": tenant_id})
                cached = None
            if cached is not None:
                return cached

        try:
            row = await self.override_repo.get_by_tenant_id(tenant_id)
        except Exception as e:
            logger.warning(
                f"Failed to load prompt override, using platform defaults: {e}",
                extra={"tenant_id": tenant_id},
            )
            return {}

        override = row.config_json if row is not None else None
        if not isinstance(override, dict):
            if override is not None:
                logger.warning(
                    "Stored prompt override is not an object, ignoring",
                    extra={"tenant_id": tenant_id},
                )
            override = {}

        if self.override_cache is not None:
            try:
                await self.override_cache.set(tenant_id, override)
            except Exception as e:
                logger.warning(f"Override cache write failed: {e}", extra={"tenant_id": tenant_id})

        return override

    async def save_default_config(self, config: dict[str, Any]) -> None:
        """Replace the platform default. Callers must refresh the default cache."""
        await self.platform_repo.set_default_prompt_config(config)

    async def save_override(self, tenant_id: int, override: dict[str, Any]) -> None:
        """Replace a tenant's override wholesale."""
        await self.override_repo.upsert(tenant_id, override)
        if self.override_cache is not None:
            try:
                await self.override_cache.invalidate(tenant_id)
            except Exception as e:
                # Row is committed; the stale entry expires with its TTL
                logger.warning(
                    f"Override cache invalidation failed: {e}", extra={"tenant_id": tenant_id}
                )

    async def reset_override(self, tenant_id: int) -> None:
        """Reset a tenant to platform defaults."""
        await self.save_override(tenant_id, {})
