"""
Business logic for the context API.
"""
from typing import Dict, Any, List, Optional
from open_canvas_context.core.artifacts import (
    format_artifact_content,
    format_artifact_content_with_template,
)
from open_canvas_context.core.documents import ContextDocument, create_context_document_messages
from open_canvas_context.core.model_config import get_model_config
from open_canvas_context.core.reflections import format_reflections
from open_canvas_context.core.settings import ProviderSettings


def to_runnable_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap a flat config into ``{"configurable": ...}`` unless it already is."""
    if not config:
        return {"configurable": {}}
    if "configurable" in config:
        return config
    return {"configurable": config}


def resolve_model_config(config: Dict[str, Any], settings: ProviderSettings) -> Dict[str, Any]:
    """Resolve the model provider without exposing credentials."""
    resolved = get_model_config(to_runnable_config(config), settings)
    azure_config = resolved.get("azureConfig") or {}
    return {
        "modelName": resolved["modelName"],
        "modelProvider": resolved["modelProvider"],
        "hasApiKey": bool(resolved.get("apiKey") or azure_config.get("azureOpenAIApiKey")),
        "baseUrl": resolved.get("baseUrl"),
        "region": resolved.get("region"),
    }


def render_reflections(
    reflections: Dict[str, Any],
    only_style: bool = False,
    only_content: bool = False,
) -> Dict[str, str]:
    return {
        "reflections": format_reflections(
            reflections, only_style=only_style, only_content=only_content
        )
    }


def render_artifact(
    content: Dict[str, Any],
    shorten_content: bool = False,
    template: Optional[str] = None,
) -> Dict[str, str]:
    if template is not None:
        rendered = format_artifact_content_with_template(template, content, shorten_content)
    else:
        rendered = format_artifact_content(content, shorten_content)
    return {"content": rendered}


async def build_context_messages(
    config: Dict[str, Any],
    documents: Optional[List[ContextDocument]],
    settings: ProviderSettings,
) -> Dict[str, List[Dict[str, Any]]]:
    messages = await create_context_document_messages(
        to_runnable_config(config), documents, settings
    )
    return {"messages": messages}
