"""Repository implementations."""

from app.persistence.repositories.platform_config_repository import PlatformConfigRepository
from app.persistence.repositories.tenant_prompt_config_repository import TenantPromptConfigRepository
from app.persistence.repositories.tenant_repository import TenantRepository

__all__ = [
    "PlatformConfigRepository",
    "TenantPromptConfigRepository",
    "TenantRepository",
]
