"""Assembles the final system prompt from an effective prompt config."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.domain.prompts.renderer import (
    render_custom_instructions,
    render_datetime_context,
    render_intro,
    render_language_requirement,
    render_reasoning_steps,
    render_response_style,
    render_tool_format,
    render_tool_result_instruction,
    render_tool_rules,
)
from app.domain.prompts.schemas.v1.prompt_config_schema import PromptConfig, ToolDescriptor
from app.settings import settings

logger = logging.getLogger(__name__)

SECTION_ORDER = [
    "intro",
    "datetime",
    "reasoning",
    "response_style",
    "tool_rules",
    "tool_format",
    "tool_results",
    "custom_instructions",
    "language",
]


@dataclass
class PromptContext:
    """Request-time inputs for one prompt build."""

    client_name: str = ""
    language: Optional[str] = None
    now: Optional[datetime] = None
    tools: list[ToolDescriptor] = field(default_factory=list)


def _load_zone(name: str | None) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Unknown prompt timezone {name!r}, using server local time: {e}")
        return None


class PromptAssembler:
    """Renders an effective PromptConfig plus runtime context into prompt text.

    Sections are emitted in SECTION_ORDER and skipped when they render
    empty. The assembler holds no per-request state, so one instance can be
    shared across tenants.
    """

    def __init__(
        self,
        default_language: str | None = None,
        timezone: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the assembler.

        Args:
            default_language: Platform language; no language section is added for it
            timezone: IANA timezone for the date section (None or unknown = server local time)
            clock: Optional clock override returning the current local time
        """
        self.default_language = default_language or settings.default_language
        self.timezone = timezone if timezone is not None else settings.prompt_timezone
        self._zone = _load_zone(self.timezone)
        self._clock = clock

    def now(self) -> datetime:
        """Get the current local time."""
        if self._clock is not None:
            return self._clock()
        if self._zone is not None:
            return datetime.now(self._zone)
        return datetime.now()

    def assemble(self, config: PromptConfig, context: PromptContext) -> str:
        """Assemble the final system prompt.

        Args:
            config: Effective prompt config
            context: Tenant name, language, clock and tools for this request

        Returns:
            Assembled system prompt string
        """
        sections = self._build_sections(config, context)

        prompt_parts = []
        for section_key in SECTION_ORDER:
            content = sections.get(section_key)
            if content:
                prompt_parts.append(content)

        return "\n\n".join(prompt_parts)

    def _build_sections(self, config: PromptConfig, context: PromptContext) -> dict[str, str]:
        language = context.language or self.default_language
        now = context.now or self.now()

        sections = {
            "intro": render_intro(config.intro_template, context.client_name),
            "datetime": render_datetime_context(now),
            "reasoning": render_reasoning_steps(config.reasoning_enabled, config.reasoning_steps),
            "response_style": render_response_style(
                config.response_style,
                config.tone_instructions,
                config.formality_instructions,
            ),
            "tool_rules": render_tool_rules(config.tool_rules),
            "tool_format": render_tool_format(
                config.tool_format_template,
                context.tools,
                config.tool_instructions,
            ),
            "tool_results": render_tool_result_instruction(config.tool_result_instruction),
            "custom_instructions": render_custom_instructions(config.custom_instructions),
        }

        if language != self.default_language:
            sections["language"] = render_language_requirement(
                language,
                config.language_names,
                config.language_instruction_template,
            )

        return sections


def assemble_prompt(
    config: PromptConfig,
    client_name: str,
    language: str | None = None,
    tools: list[ToolDescriptor] | None = None,
    now: datetime | None = None,
) -> str:
    """Convenience function to assemble a prompt.

    Args:
        config: Effective prompt config
        client_name: Tenant display name
        language: Tenant response language code
        tools: Available tools
        now: Current local time (defaults to the clock)

    Returns:
        Assembled system prompt
    """
    assembler = PromptAssembler()
    context = PromptContext(
        client_name=client_name,
        language=language,
        now=now,
        tools=list(tools or []),
    )
    return assembler.assemble(config, context)
