"""Tenant repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.tenant import Tenant


class TenantRepository:
    """Repository for Tenant entities."""

    def __init__(self, session: AsyncSession):
        """Initialize tenant repository."""
        self.session = session

    async def get_by_id(self, tenant_id: int) -> Tenant | None:
        """Get tenant by ID."""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, name: str, subdomain: str, language: str = "en") -> Tenant:
        """Create a tenant."""
        tenant = Tenant(name=name, subdomain=subdomain, language=language)
        self.session.add(tenant)
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant
