"""
Formatting of stored reflections (style rules and user facts) for prompts.
"""
import json
import logging
from typing import Any, List, Mapping, Optional, Union
from langchain_core.runnables import RunnableConfig
from langgraph.store.base import BaseStore
from pydantic import BaseModel

from open_canvas_context.core.exceptions import InvalidArgumentError, MissingConfigError

logger = logging.getLogger(__name__)

NO_REFLECTIONS = "No reflections found."
NO_STYLE_RULES = "No style guidelines found."
NO_CONTENT_RULES = "No memories/facts found."

MEMORY_NAMESPACE_PREFIX = "memories"
MEMORY_KEY = "reflection"


class Reflections(BaseModel):
    """Style rules and user facts as stored in the memory store.

    Either field may hold a JSON-encoded list when written by older clients.
    """
    styleRules: Optional[Union[List[str], str]] = None
    content: Optional[Union[List[str], str]] = None


def _parse_rules(rules: Any, label: str) -> Optional[List[str]]:
    """Return ``rules`` as a list of strings, or None if it can't be read as one."""
    if isinstance(rules, list):
        return [str(rule) for rule in rules]
    try:
        parsed = json.loads(rules)
    except (TypeError, ValueError):
        logger.error(
            "Failed to parse %s. type: %s, value: %r", label, type(rules).__name__, rules
        )
        return None
    if not isinstance(parsed, list):
        logger.error(
            "Failed to parse %s. Expected a JSON list, got %s", label, type(parsed).__name__
        )
        return None
    return [str(rule) for rule in parsed]


def _join_rules(rules: Optional[List[str]], placeholder: str) -> str:
    if rules is None:
        return placeholder
    # Only the first rule gets a bullet from the template; the rest are bare
    # lines (pinned by test_list_rules_only_first_item_bulleted).
    return "\n".join(rules)


def format_reflections(
    reflections: Union[Reflections, Mapping[str, Any]],
    only_style: bool = False,
    only_content: bool = False,
) -> str:
    """Render reflections as prompt text.

    Args:
        reflections: Reflections model or a mapping with ``styleRules`` and ``content``.
        only_style: Only include the style guidelines block.
        only_content: Only include the user facts block.

    Raises:
        InvalidArgumentError: If both ``only_style`` and ``only_content`` are set.
    """
    if only_style and only_content:
        raise InvalidArgumentError("Cannot specify both `only_style` and `only_content` as true.")

    if isinstance(reflections, BaseModel):
        reflections = reflections.model_dump()

    style_rules = _parse_rules(reflections.get("styleRules"), "style rules")
    content_rules = _parse_rules(reflections.get("content"), "content rules")

    style_string = f"""The following is a list of style guidelines previously generated by you:
<style-guidelines>
- {_join_rules(style_rules, NO_STYLE_RULES)}
</style-guidelines>"""
    content_string = f"""The following is a list of memories/facts you previously generated about the user:
<user-facts>
- {_join_rules(content_rules, NO_CONTENT_RULES)}
</user-facts>"""

    if only_style:
        return style_string
    if only_content:
        return content_string

    return style_string + "\n\n" + content_string


def ensure_store_in_config(store: Optional[BaseStore]) -> BaseStore:
    """Return the memory store, failing if the run was started without one."""
    if store is None:
        raise MissingConfigError("`store` not found in config")
    return store


def get_formatted_reflections(config: RunnableConfig, store: Optional[BaseStore] = None) -> str:
    """Fetch the assistant's reflections from the store and format them."""
    if store is None:
        return NO_REFLECTIONS
    store = ensure_store_in_config(store)

    configurable = config.get("configurable", {}) if config else {}
    assistant_id = configurable.get("assistant_id")
    if not assistant_id:
        raise MissingConfigError("`assistant_id` not found in configurable")

    item = store.get((MEMORY_NAMESPACE_PREFIX, assistant_id), MEMORY_KEY)
    if item is None or not item.value:
        return NO_REFLECTIONS
    return format_reflections(item.value)
