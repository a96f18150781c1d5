"""Repository for TenantPromptConfig."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.tenant_prompt_config import TenantPromptConfig


class TenantPromptConfigRepository:
    """Repository for tenant prompt overrides."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_tenant_id(self, tenant_id: int) -> Optional[TenantPromptConfig]:
        """Get the prompt override row for a tenant.

        Args:
            tenant_id: The tenant ID

        Returns:
            TenantPromptConfig if found, None otherwise
        """
        stmt = select(TenantPromptConfig).where(TenantPromptConfig.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, tenant_id: int, config_json: dict) -> TenantPromptConfig:
        """Replace a tenant's override wholesale, creating the row if needed.

        Args:
            tenant_id: The tenant ID
            config_json: The partial override; {} resets to platform defaults

        Returns:
            Created or updated TenantPromptConfig
        """
        config = await self.get_by_tenant_id(tenant_id)
        if config is None:
            config = TenantPromptConfig(tenant_id=tenant_id, config_json=config_json)
            self.session.add(config)
        else:
            config.config_json = config_json
            config.updated_at = datetime.utcnow()

        await self.session.commit()
        await self.session.refresh(config)
        return config
