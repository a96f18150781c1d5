"""Prompt config service: tenant prompts, previews and the AI Behavior view."""

import logging
from datetime import datetime
from typing import Any, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.tenant_context import get_tenant_context, set_tenant_context
from app.domain.prompts.assembler import PromptAssembler, PromptContext
from app.domain.prompts.base_configs import get_hardcoded_default_config
from app.domain.prompts.cache import DefaultConfigCache, TenantOverrideCache
from app.domain.prompts.exceptions import TenantNotFoundError
from app.domain.prompts.merger import resolve_effective_config
from app.domain.prompts.renderer import resolve_greeting
from app.domain.prompts.schemas.v1.prompt_config_schema import (
    CUSTOMER_VISIBLE_FIELDS,
    BehaviorSettings,
    BehaviorView,
    PromptConfig,
    ToolDescriptor,
)
from app.domain.prompts.store import ConfigStore
from app.persistence.models.tenant import Tenant
from app.persistence.repositories.tenant_repository import TenantRepository

logger = logging.getLogger(__name__)

PREVIEW_CLIENT_NAME = "Sample Business"


def _to_tools(tools: Iterable[ToolDescriptor | dict] | None) -> list[ToolDescriptor]:
    if not tools:
        return []
    return [t if isinstance(t, ToolDescriptor) else ToolDescriptor.model_validate(t) for t in tools]


def customized_fields(override: dict[str, Any]) -> list[str]:
    """List the customer-visible fields a tenant override actually sets."""
    fields = []
    for name in CUSTOMER_VISIBLE_FIELDS:
        if name not in override:
            continue
        if name == "custom_instructions" and not override[name]:
            continue
        fields.append(name)
    return fields


class PromptConfigService:
    """Facade over the store, merger and assembler.

    The default-config cache is owned by the hosting process and shared by
    every service instance; call refresh_cached_config() after writing the
    platform default through any other path.
    """

    def __init__(
        self,
        session: AsyncSession,
        default_cache: DefaultConfigCache,
        override_cache: TenantOverrideCache | None = None,
        assembler: PromptAssembler | None = None,
    ) -> None:
        """Initialize prompt config service."""
        self.session = session
        self.default_cache = default_cache
        self.store = ConfigStore(session, default_cache, override_cache)
        self.tenant_repo = TenantRepository(session)
        self.assembler = assembler or PromptAssembler()

    async def _get_tenant(self, tenant_id: int) -> Tenant:
        tenant = await self.tenant_repo.get_by_id(tenant_id)
        if tenant is None:
            raise TenantNotFoundError(tenant_id)
        return tenant

    async def get_effective_config(
        self,
        tenant_id: int | None,
        override: dict[str, Any] | None = None,
    ) -> PromptConfig:
        """Get the effective config for a tenant.

        Args:
            tenant_id: Tenant ID (None for the platform default alone)
            override: Explicit override to use instead of the stored one (previews)

        Returns:
            Effective PromptConfig
        """
        default = await self.store.get_default_config()
        if override is None:
            override = await self.store.get_override(tenant_id) if tenant_id is not None else {}
        return resolve_effective_config(default, override)

    async def build_system_prompt(
        self,
        tenant_id: int | None,
        tenant_name: str,
        language: str | None = None,
        tools: Iterable[ToolDescriptor | dict] | None = None,
        override: dict[str, Any] | None = None,
        now: datetime | None = None,
    ) -> str:
        """Build the system prompt for a conversation turn or a preview.

        Args:
            tenant_id: Tenant ID
            tenant_name: Tenant display name substituted into the intro
            language: Tenant response language code
            tools: Available tool descriptors
            override: Unsaved override to preview instead of the stored one
            now: Current local time (defaults to the assembler clock)

        Returns:
            Assembled system prompt
        """
        previous_tenant = get_tenant_context()
        if tenant_id is not None:
            set_tenant_context(tenant_id)
        try:
            config = await self.get_effective_config(tenant_id, override)
            context = PromptContext(
                client_name=tenant_name,
                language=language,
                now=now,
                tools=_to_tools(tools),
            )
            prompt = self.assembler.assemble(config, context)
            logger.debug("Built system prompt", extra={"prompt_length": len(prompt)})
            return prompt
        finally:
            set_tenant_context(previous_tenant)

    async def build_tenant_prompt(
        self,
        tenant_id: int,
        tools: Iterable[ToolDescriptor | dict] | None = None,
        override: dict[str, Any] | None = None,
        now: datetime | None = None,
    ) -> str:
        """Build the system prompt using the tenant's stored name and language.

        Raises:
            TenantNotFoundError: If the tenant does not exist
        """
        tenant = await self._get_tenant(tenant_id)
        return await self.build_system_prompt(
            tenant_id,
            tenant.name,
            language=tenant.language,
            tools=tools,
            override=override,
            now=now,
        )

    async def preview_default_prompt(
        self,
        config: dict[str, Any] | None = None,
        tenant_name: str = PREVIEW_CLIENT_NAME,
        language: str | None = None,
        tools: Iterable[ToolDescriptor | dict] | None = None,
        now: datetime | None = None,
    ) -> str:
        """Preview the prompt an admin's candidate platform default would produce.

        Args:
            config: Candidate default config; the stored default when omitted
        """
        if config is None:
            config = await self.store.get_default_config()
        effective = resolve_effective_config(config)
        context = PromptContext(
            client_name=tenant_name,
            language=language,
            now=now,
            tools=_to_tools(tools),
        )
        return self.assembler.assemble(effective, context)

    async def get_behavior_view(self, tenant_id: int) -> dict[str, Any]:
        """Get the AI Behavior settings payload for a tenant (camelCase JSON)."""
        await self._get_tenant(tenant_id)
        default = await self.store.get_default_config()
        override = await self.store.get_override(tenant_id)

        effective = resolve_effective_config(default, override)
        defaults = resolve_effective_config(default)

        view = BehaviorView(
            **BehaviorSettings.from_config(effective).model_dump(),
            has_custom_config=bool(override),
            customized_fields=customized_fields(override),
            defaults=BehaviorSettings.from_config(defaults),
        )
        return view.model_dump(mode="json", by_alias=True)

    async def update_override(self, tenant_id: int, override: dict[str, Any]) -> None:
        """Replace a tenant's override wholesale (not merged with the stored one)."""
        await self._get_tenant(tenant_id)
        await self.store.save_override(tenant_id, override)
        logger.info(
            "Tenant prompt override updated",
            extra={"tenant_id": tenant_id, "fields": sorted(override)},
        )

    async def reset_override(self, tenant_id: int) -> None:
        """Reset a tenant to the platform defaults."""
        await self._get_tenant(tenant_id)
        await self.store.reset_override(tenant_id)
        logger.info("Tenant prompt override reset", extra={"tenant_id": tenant_id})

    async def update_default_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """Replace the platform default config and refresh the cache."""
        await self.store.save_default_config(config)
        logger.info("Default prompt config updated")
        return await self.refresh_cached_config()

    async def reset_default_config(self) -> dict[str, Any]:
        """Reset the platform default to the hardcoded defaults."""
        return await self.update_default_config(get_hardcoded_default_config())

    async def refresh_cached_config(self) -> dict[str, Any]:
        """Invalidate the cached default and reload it from storage."""
        self.default_cache.invalidate()
        config = await self.store.get_default_config()
        logger.info("Default prompt config refreshed")
        return config

    async def get_tool_guidance(self) -> str:
        """Tool guidance text appended to native function-calling tool descriptions."""
        config = resolve_effective_config(await self.store.get_default_config())
        return config.tool_guidance

    async def get_greeting(self, tenant_id: int, language: str | None = None) -> str | None:
        """Opening greeting for a tenant's conversations, or None when disabled.

        Uses the tenant's stored language unless one is given.
        """
        tenant = await self._get_tenant(tenant_id)
        config = await self.get_effective_config(tenant_id)
        return resolve_greeting(config, language or tenant.language)
