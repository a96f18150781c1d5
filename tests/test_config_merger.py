"""Tests for merging platform defaults with tenant overrides."""

import copy

from app.domain.prompts.base_configs import get_hardcoded_default_config
from app.domain.prompts.merger import merge_configs, resolve_effective_config


class TestMergeConfigs:
    """Field-level override semantics."""

    def test_empty_override_returns_default(self, sample_default_config):
        assert merge_configs(sample_default_config, {}) == sample_default_config
        assert merge_configs(sample_default_config, None) == sample_default_config

    def test_merge_with_itself_is_identity(self, sample_default_config):
        assert merge_configs(sample_default_config, sample_default_config) == sample_default_config

    def test_merge_is_idempotent(self, sample_default_config):
        override = {
            "response_style": {"tone": "professional"},
            "tool_rules": ["Only one"],
            "custom_instructions": "Mention the loyalty program",
            "extra": {"nested": {"a": 1, "b": None}},
        }
        once = merge_configs(sample_default_config, override)
        twice = merge_configs(sample_default_config, once)
        assert twice == once

    def test_arrays_are_replaced_not_concatenated(self):
        merged = merge_configs({"tool_rules": ["a", "b"]}, {"tool_rules": ["c"]})
        assert merged["tool_rules"] == ["c"]

    def test_empty_array_replaces_default(self, sample_default_config):
        merged = merge_configs(sample_default_config, {"reasoning_steps": []})
        assert merged["reasoning_steps"] == []

    def test_nested_objects_merge_recursively(self):
        default = {"response_style": {"tone": "friendly", "max_sentences": 2}}
        override = {"response_style": {"tone": "formal"}}
        merged = merge_configs(default, override)
        assert merged["response_style"] == {"tone": "formal", "max_sentences": 2}

    def test_nested_merge_adds_new_keys(self):
        merged = merge_configs({"a": 1, "nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
        assert merged == {"a": 1, "nested": {"x": 1, "y": 3, "z": 4}}

    def test_none_values_keep_default(self, sample_default_config):
        merged = merge_configs(
            sample_default_config,
            {"reasoning_enabled": None, "response_style": {"tone": None}},
        )
        assert merged["reasoning_enabled"] is True
        assert merged["response_style"]["tone"] == "friendly"

    def test_scalars_replace(self, sample_default_config):
        merged = merge_configs(sample_default_config, {"reasoning_enabled": False})
        assert merged["reasoning_enabled"] is False

    def test_false_and_zero_are_not_treated_as_missing(self):
        merged = merge_configs({"flag": True, "count": 3}, {"flag": False, "count": 0})
        assert merged == {"flag": False, "count": 0}

    def test_scalar_for_object_field_is_ignored(self, sample_default_config):
        merged = merge_configs(sample_default_config, {"response_style": "loud"})
        assert merged["response_style"] == sample_default_config["response_style"]

    def test_object_for_list_field_is_ignored(self, sample_default_config):
        merged = merge_configs(sample_default_config, {"tool_rules": {"0": "x"}})
        assert merged["tool_rules"] == ["Rule 1", "Rule 2"]

    def test_inputs_are_not_mutated(self, sample_default_config):
        default_before = copy.deepcopy(sample_default_config)
        override = {"response_style": {"tone": "professional"}, "tool_rules": ["x"]}
        override_before = copy.deepcopy(override)

        merged = merge_configs(sample_default_config, override)
        merged["response_style"]["tone"] = "casual"
        merged["tool_rules"].append("y")

        assert sample_default_config == default_before
        assert override == override_before


class TestResolveEffectiveConfig:
    """Typed resolution of the merged config."""

    def test_override_fields_apply(self, sample_default_config):
        config = resolve_effective_config(
            sample_default_config,
            {
                "response_style": {"tone": "professional", "max_sentences": 3},
                "custom_instructions": "Be extra helpful",
            },
        )
        assert config.response_style.tone == "professional"
        assert config.response_style.max_sentences == 3
        assert config.response_style.formality == "casual"
        assert config.custom_instructions == "Be extra helpful"
        assert config.reasoning_enabled is True

    def test_absent_fields_fall_back_to_default_not_empty(self, sample_default_config):
        config = resolve_effective_config(sample_default_config, {"tool_rules": ["Only"]})
        assert [s.title for s in config.reasoning_steps] == ["UNDERSTAND", "RESPOND"]
        assert config.intro_template == "You are a friendly assistant for {client_name}."

    def test_malformed_nested_field_is_dropped(self, sample_default_config):
        config = resolve_effective_config(
            sample_default_config,
            {"response_style": {"tone": "professional", "max_sentences": 99}},
        )
        assert config.response_style.tone == "professional"
        assert config.response_style.max_sentences == 2

    def test_malformed_list_field_falls_back_to_default(self, sample_default_config):
        config = resolve_effective_config(
            sample_default_config,
            {"reasoning_steps": [{"title": "ONLY TITLE"}], "tool_rules": ["Kept"]},
        )
        assert [s.title for s in config.reasoning_steps] == ["UNDERSTAND", "RESPOND"]
        assert config.tool_rules == ["Kept"]

    def test_unknown_keys_are_ignored(self, sample_default_config):
        config = resolve_effective_config(sample_default_config, {"surprise": {"a": 1}})
        assert not hasattr(config, "surprise")

    def test_invalid_default_uses_hardcoded_default(self):
        config = resolve_effective_config({"reasoning_steps": "not a list"})
        expected = get_hardcoded_default_config()
        assert len(config.reasoning_steps) == len(expected["reasoning_steps"])
        assert config.tool_rules == expected["tool_rules"]
