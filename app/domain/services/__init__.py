"""Domain services."""

from app.domain.services.prompt_config_service import PromptConfigService

__all__ = ["PromptConfigService"]
