"""Pydantic schemas for the platform/tenant prompt configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.prompts.base_configs.common import (
    DEFAULT_INTRO_TEMPLATE,
    DEFAULT_LANGUAGE_INSTRUCTION_TEMPLATE,
    DEFAULT_TOOL_FORMAT_TEMPLATE,
    DEFAULT_TOOL_GUIDANCE,
    DEFAULT_TOOL_RESULT_INSTRUCTION,
)

# Fields the tenant can customize from the AI Behavior screen
CUSTOMER_VISIBLE_FIELDS = (
    "reasoning_enabled",
    "reasoning_steps",
    "response_style",
    "tool_rules",
    "custom_instructions",
)


class ReasoningStep(BaseModel):
    """A single guided-reasoning step."""

    title: str
    instruction: str


class ResponseStyle(BaseModel):
    """How the assistant should phrase replies."""

    # Stored snake_case, shown camelCase; error locs keep field names
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, loc_by_alias=False)

    tone: Optional[str] = None  # friendly, professional, casual
    formality: Optional[str] = None  # casual, neutral, formal
    max_sentences: Optional[int] = Field(default=None, ge=1, le=10)


class ToolDescriptor(BaseModel):
    """A tool the assistant may call during this conversation."""

    name: str
    description: str = ""


class PromptConfig(BaseModel):
    """Effective prompt configuration (platform default merged with a tenant override).

    Unknown keys survive the dict-level merge but are ignored here.
    """

    model_config = ConfigDict(extra="ignore")

    reasoning_enabled: bool = True
    reasoning_steps: list[ReasoningStep] = Field(default_factory=list)
    response_style: ResponseStyle = Field(default_factory=ResponseStyle)
    tool_rules: list[str] = Field(default_factory=list)
    custom_instructions: Optional[str] = None

    intro_template: str = DEFAULT_INTRO_TEMPLATE
    tone_instructions: dict[str, str] = Field(default_factory=dict)
    formality_instructions: dict[str, str] = Field(default_factory=dict)
    language_names: dict[str, str] = Field(default_factory=dict)
    tool_instructions: dict[str, str] = Field(default_factory=dict)

    language_instruction_template: str = DEFAULT_LANGUAGE_INSTRUCTION_TEMPLATE
    tool_format_template: str = DEFAULT_TOOL_FORMAT_TEMPLATE
    tool_result_instruction: str = DEFAULT_TOOL_RESULT_INSTRUCTION
    tool_guidance: str = DEFAULT_TOOL_GUIDANCE

    greeting_enabled: bool = True
    greeting_message: Optional[str] = None


class BehaviorSettings(BaseModel):
    """Customer-visible subset of a prompt config, serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reasoning_enabled: bool
    reasoning_steps: list[ReasoningStep]
    response_style: ResponseStyle
    tool_rules: list[str]
    custom_instructions: Optional[str] = None

    @classmethod
    def from_config(cls, config: PromptConfig) -> "BehaviorSettings":
        """Project the customer-visible fields out of a full config."""
        return cls(
            reasoning_enabled=config.reasoning_enabled,
            reasoning_steps=config.reasoning_steps,
            response_style=config.response_style,
            tool_rules=config.tool_rules,
            custom_instructions=config.custom_instructions,
        )


class BehaviorView(BehaviorSettings):
    """AI Behavior settings screen payload."""

    has_custom_config: bool
    customized_fields: list[str]
    defaults: BehaviorSettings
