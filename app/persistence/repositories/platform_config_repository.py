"""Repository for platform-wide configuration values."""

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.platform_config import PlatformConfig

DEFAULT_PROMPT_CONFIG_KEY = "default_prompt_config"


class PlatformConfigRepository:
    """Key/value access to the platform_config table."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get(self, key: str) -> Any | None:
        """Get a config value by key.

        Args:
            key: Config key

        Returns:
            Stored JSON value, or None if the key is not set
        """
        stmt = select(PlatformConfig).where(PlatformConfig.key == key)
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        return row.value if row is not None else None

    async def set(self, key: str, value: Any) -> PlatformConfig:
        """Create or replace a config value.

        Args:
            key: Config key
            value: JSON-serializable value

        Returns:
            The saved PlatformConfig row
        """
        stmt = select(PlatformConfig).where(PlatformConfig.key == key)
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            row = PlatformConfig(key=key, value=value)
            self.session.add(row)
        else:
            row.value = value
            row.updated_at = datetime.utcnow()

        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def get_default_prompt_config(self) -> dict | None:
        """Get the stored platform default prompt config, if any."""
        return await self.get(DEFAULT_PROMPT_CONFIG_KEY)

    async def set_default_prompt_config(self, config: dict) -> PlatformConfig:
        """Replace the platform default prompt config."""
        return await self.set(DEFAULT_PROMPT_CONFIG_KEY, config)
