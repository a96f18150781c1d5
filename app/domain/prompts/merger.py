"""Merging of the platform default prompt config with tenant overrides."""

import copy
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from app.domain.prompts.base_configs import get_hardcoded_default_config
from app.domain.prompts.schemas.v1.prompt_config_schema import PromptConfig

logger = logging.getLogger(__name__)


def merge_configs(parent: Mapping[str, Any], child: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge two configs, child overrides parent.

    Rules, applied per key of ``child``:
    - None values are skipped (parent wins)
    - lists replace the parent's value wholesale
    - dicts merge recursively into a parent dict
    - anything else replaces the parent's value

    A child value whose shape does not match a parent dict or list (e.g. a
    string where the parent has an object) is ignored. Neither argument is
    mutated and the result shares no mutable state with them.

    Args:
        parent: Default/parent config
        child: Override/child config

    Returns:
        Merged config
    """
    merged = copy.deepcopy(dict(parent))
    if not child:
        return merged

    for key, value in child.items():
        if value is None:
            continue

        current = merged.get(key)
        if isinstance(value, list):
            if isinstance(current, dict):
                logger.warning("Ignoring list override for object field", extra={"field": key})
                continue
            merged[key] = copy.deepcopy(value)
        elif isinstance(value, dict):
            if isinstance(current, dict):
                merged[key] = merge_configs(current, value)
            elif isinstance(current, list):
                logger.warning("Ignoring object override for list field", extra={"field": key})
            else:
                merged[key] = merge_configs({}, value)
        elif isinstance(current, (dict, list)):
            logger.warning("Ignoring scalar override for structured field", extra={"field": key})
        else:
            merged[key] = value

    return merged


def _prune_path(override: dict[str, Any], loc: tuple[Any, ...]) -> bool:
    """Remove the override entry responsible for a validation error.

    Walks ``loc`` through nested dicts and deletes the deepest key that is
    still a dict member. List indexes drop the whole list field.

    Returns:
        True if something was removed
    """
    node = override
    for i, part in enumerate(loc):
        if not isinstance(part, str) or not isinstance(node, dict) or part not in node:
            return False
        child = node[part]
        if i == len(loc) - 1 or not isinstance(child, dict):
            del node[part]
            return True
        node = child
    return False


def _validate(config: dict[str, Any]) -> PromptConfig:
    return PromptConfig.model_validate(config)


def resolve_effective_config(
    default: Mapping[str, Any],
    override: Mapping[str, Any] | None = None,
) -> PromptConfig:
    """Merge default + override and validate the result.

    Override fields that fail validation are dropped and the merge retried,
    so a malformed override degrades to the default for that field instead
    of failing the whole prompt.

    Args:
        default: Platform default config
        override: Tenant override (partial)

    Returns:
        Validated effective PromptConfig
    """
    try:
        return _validate(merge_configs(default, override))
    except ValidationError as e:
        errors = e.errors()

    if override:
        pruned = copy.deepcopy(dict(override))
        removed = [err["loc"] for err in errors if _prune_path(pruned, tuple(err["loc"]))]
        if removed:
            logger.warning(
                "Dropped malformed prompt override fields",
                extra={"fields": [".".join(str(p) for p in loc) for loc in removed]},
            )
            try:
                return _validate(merge_configs(default, pruned))
            except ValidationError:
                logger.warning("Prompt override still invalid after pruning, using default only")

        try:
            return _validate(merge_configs(default, {}))
        except ValidationError as e:
            errors = e.errors()

    logger.warning(
        "Platform default prompt config is invalid, using hardcoded default",
        extra={"error_count": len(errors)},
    )
    return _validate(get_hardcoded_default_config())
