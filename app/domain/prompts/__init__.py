"""Prompt configuration pipeline.

This module turns layered configuration into the system prompt:
- Base configs: Hardcoded defaults used when storage is empty or unavailable
- Store: Platform default + per-tenant override, with caching
- Merger: Combines default + override into the effective config
- Assembler: Renders the effective config plus request context into text
"""

from app.domain.prompts.assembler import PromptAssembler, PromptContext
from app.domain.prompts.cache import DefaultConfigCache, TenantOverrideCache
from app.domain.prompts.merger import merge_configs, resolve_effective_config
from app.domain.prompts.store import ConfigStore

__all__ = [
    "ConfigStore",
    "DefaultConfigCache",
    "PromptAssembler",
    "PromptContext",
    "TenantOverrideCache",
    "merge_configs",
    "resolve_effective_config",
]
