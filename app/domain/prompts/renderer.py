"""Renderers turning an effective prompt config into prompt text sections."""

from datetime import date, datetime, timedelta

from app.domain.prompts.base_configs.common import (
    DEFAULT_FORMALITY_INSTRUCTIONS,
    DEFAULT_GREETINGS,
    DEFAULT_INTRO_TEMPLATE,
    DEFAULT_LANGUAGE_INSTRUCTION_TEMPLATE,
    DEFAULT_LANGUAGE_NAMES,
    DEFAULT_TONE_INSTRUCTIONS,
    DEFAULT_TOOL_FORMAT_TEMPLATE,
    DEFAULT_TOOL_RESULT_INSTRUCTION,
)
from app.domain.prompts.schemas.v1.prompt_config_schema import (
    PromptConfig,
    ReasoningStep,
    ResponseStyle,
    ToolDescriptor,
)


def substitute(template: str, **values: str | None) -> str:
    """Replace literal ``{name}`` placeholders. Missing values become empty strings."""
    result = template
    for name, value in values.items():
        result = result.replace("{" + name + "}", value or "")
    return result


def render_intro(intro_template: str, client_name: str | None) -> str:
    """Render the intro line with the tenant name."""
    return substitute(intro_template or DEFAULT_INTRO_TEMPLATE, client_name=client_name)


def render_datetime_context(now: datetime) -> str:
    """Render the current date/time so relative dates can be resolved.

    ``now`` must already be in the caller's local time; only its calendar
    date is used for today/tomorrow.
    """
    today: date = now.date()
    tomorrow = today + timedelta(days=1)
    lines = ["## CURRENT DATE AND TIME"]
    lines.append(f"Current date and time: {now.strftime('%A, %B %d, %Y %I:%M %p')}")
    lines.append(f"Today: {today.isoformat()}")
    lines.append(f"Tomorrow: {tomorrow.isoformat()}")
    lines.append(
        'Use these dates to resolve relative references such as "today", "tomorrow" '
        'or "next Monday". Dates passed to tools must use the YYYY-MM-DD format.'
    )
    return "\n".join(lines)


def render_reasoning_steps(enabled: bool, steps: list[ReasoningStep]) -> str:
    """Render the guided reasoning section."""
    if not enabled or not steps:
        return ""

    lines = ["## YOUR REASONING PROCESS (follow these steps internally before responding)"]
    for index, step in enumerate(steps, start=1):
        lines.append("")
        lines.append(f"Step {index}: {step.title}\n{step.instruction}")
    return "\n".join(lines)


def _lookup(key: str | None, configured: dict[str, str], builtin: dict[str, str]) -> str | None:
    if not key:
        return None
    return configured.get(key) or builtin.get(key)


def render_response_style(
    style: ResponseStyle,
    tone_instructions: dict[str, str],
    formality_instructions: dict[str, str],
) -> str:
    """Render tone, length and formality directives.

    Tone/formality values with no sentence in either the configured or the
    built-in map are skipped.
    """
    lines = []
    tone = _lookup(style.tone, tone_instructions, DEFAULT_TONE_INSTRUCTIONS)
    if tone:
        lines.append(f"- {tone}")
    if style.max_sentences:
        lines.append(f"- Keep responses to {style.max_sentences} sentence(s) maximum.")
    formality = _lookup(style.formality, formality_instructions, DEFAULT_FORMALITY_INSTRUCTIONS)
    if formality:
        lines.append(f"- {formality}")

    if not lines:
        return ""
    return "\n".join(["## RESPONSE STYLE", *lines])


def render_tool_rules(rules: list[str]) -> str:
    """Render numbered tool usage rules."""
    if not rules:
        return ""
    lines = ["## TOOL USAGE RULES"]
    for index, rule in enumerate(rules, start=1):
        lines.append(f"{index}. {rule}")
    return "\n".join(lines)


def render_tool_format(
    tool_format_template: str,
    tools: list[ToolDescriptor] | None = None,
    tool_instructions: dict[str, str] | None = None,
) -> str:
    """Render the text tool-call syntax, plus the available tools if any."""
    lines = ["## TOOL FORMAT (for models without native function calling)"]
    lines.append(tool_format_template or DEFAULT_TOOL_FORMAT_TEMPLATE)

    if tools:
        instructions = tool_instructions or {}
        lines.append("")
        lines.append("Available tools:")
        for tool in tools:
            line = f"- {tool.name}"
            if tool.description:
                line += f": {tool.description}"
            lines.append(line)
            guidance = instructions.get(tool.name)
            if guidance:
                lines.append(f"  {guidance}")

    return "\n".join(lines)


def render_tool_result_instruction(instruction: str) -> str:
    """Render the after-tool-result instruction."""
    return "\n".join([
        "## AFTER RECEIVING TOOL RESULTS",
        instruction or DEFAULT_TOOL_RESULT_INSTRUCTION,
    ])


def render_custom_instructions(custom_instructions: str | None) -> str:
    """Render free-form tenant instructions."""
    if not custom_instructions or not custom_instructions.strip():
        return ""
    return f"## ADDITIONAL INSTRUCTIONS\n{custom_instructions}"


def render_language_requirement(
    language: str,
    language_names: dict[str, str],
    template: str,
) -> str:
    """Render the response language requirement.

    Unknown codes are used verbatim as the language name.
    """
    language_name = (
        language_names.get(language) or DEFAULT_LANGUAGE_NAMES.get(language) or language
    )
    instruction = substitute(
        template or DEFAULT_LANGUAGE_INSTRUCTION_TEMPLATE,
        language_name=language_name,
    )
    return f"## LANGUAGE REQUIREMENT\n{instruction}"


def resolve_greeting(config: PromptConfig, language: str | None) -> str | None:
    """Get the opening greeting for a conversation.

    Returns None when greetings are disabled.
    """
    if not config.greeting_enabled:
        return None
    if config.greeting_message:
        return config.greeting_message
    return DEFAULT_GREETINGS.get(language or "", DEFAULT_GREETINGS["en"])
