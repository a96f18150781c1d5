"""Built-in defaults for the prompt configuration."""

from app.domain.prompts.base_configs.common import (
    DEFAULT_FORMALITY_INSTRUCTIONS,
    DEFAULT_GREETINGS,
    DEFAULT_LANGUAGE_NAMES,
    DEFAULT_TONE_INSTRUCTIONS,
    HARDCODED_DEFAULT_CONFIG,
    get_hardcoded_default_config,
)

__all__ = [
    "DEFAULT_FORMALITY_INSTRUCTIONS",
    "DEFAULT_GREETINGS",
    "DEFAULT_LANGUAGE_NAMES",
    "DEFAULT_TONE_INSTRUCTIONS",
    "HARDCODED_DEFAULT_CONFIG",
    "get_hardcoded_default_config",
]
