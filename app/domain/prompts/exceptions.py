"""Exceptions raised by the prompt configuration pipeline."""


class PromptConfigError(Exception):
    """Base exception for prompt configuration errors."""


class TenantNotFoundError(PromptConfigError):
    """Raised when a tenant-scoped operation references a missing tenant."""

    def __init__(self, tenant_id: int):
        self.tenant_id = tenant_id
        super().__init__(f"Tenant {tenant_id} not found")
