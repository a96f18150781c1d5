"""Database models."""

from app.persistence.models.platform_config import PlatformConfig
from app.persistence.models.tenant import Tenant
from app.persistence.models.tenant_prompt_config import TenantPromptConfig

__all__ = [
    "PlatformConfig",
    "Tenant",
    "TenantPromptConfig",
]
