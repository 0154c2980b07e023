"""
Artifact content helpers.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel

SHORTENED_CONTENT_LENGTH = 500


def _as_dict(content: Any) -> Dict[str, Any]:
    if isinstance(content, BaseModel):
        return content.model_dump()
    return dict(content) if content else {}


def is_artifact_code_content(content: Any) -> bool:
    """Check whether artifact content is the code variant."""
    content = _as_dict(content)
    return content.get("type") == "code" and "code" in content


def is_artifact_markdown_content(content: Any) -> bool:
    """Check whether artifact content is the markdown variant."""
    content = _as_dict(content)
    return content.get("type") == "text" and "fullMarkdown" in content


def get_artifact_content(artifact: Any) -> Optional[Dict[str, Any]]:
    """Get the content entry currently selected in an artifact.

    Falls back to the last entry when ``currentIndex`` does not match any of them.
    """
    artifact = _as_dict(artifact)
    contents = artifact.get("contents") or []
    if not contents:
        return None

    current_index = artifact.get("currentIndex")
    for content in contents:
        content = _as_dict(content)
        if content.get("index") == current_index:
            return content
    return _as_dict(contents[-1])


def format_artifact_content(content: Any, shorten_content: bool = False) -> str:
    """Render artifact content as ``Title/Artifact type/Content`` lines."""
    content = _as_dict(content)
    if is_artifact_code_content(content):
        artifact_content = content.get("code")
    else:
        artifact_content = content.get("fullMarkdown")

    if shorten_content and artifact_content is not None:
        artifact_content = artifact_content[:SHORTENED_CONTENT_LENGTH]

    return (
        f"Title: {content.get('title')}\n"
        f"Artifact type: {content.get('type')}\n"
        f"Content: {artifact_content}"
    )


def format_artifact_content_with_template(
    template: str,
    content: Any,
    shorten_content: bool = False,
) -> str:
    """Substitute the first ``{artifact}`` placeholder in ``template``."""
    return template.replace("{artifact}", format_artifact_content(content, shorten_content), 1)
