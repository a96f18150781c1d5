"""Tenant prompt override model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.persistence.database import Base, JSONType


class TenantPromptConfig(Base):
    """Stores a tenant's partial override of the platform prompt configuration.

    The override is replaced wholesale on every write; an empty object means
    the tenant uses the platform defaults. Merging with the default happens
    at render time, never here.
    """

    __tablename__ = "tenant_prompt_configs"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    config_json = Column(JSONType, nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    # Relationships
    tenant = relationship("Tenant", back_populates="prompt_config")

    def __repr__(self) -> str:
        return f"<TenantPromptConfig(id={self.id}, tenant_id={self.tenant_id})>"
