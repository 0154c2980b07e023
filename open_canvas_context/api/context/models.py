"""
Request/Response models for the context API.
"""
from pydantic import BaseModel
from typing import List, Dict, Any, Optional
from open_canvas_context.core.documents import ContextDocument


class ModelConfigRequest(BaseModel):
    """Request model for model config resolution."""
    config: Dict[str, Any]


class ModelConfigResponse(BaseModel):
    """Resolved provider for a model. Credentials are never echoed back."""
    modelName: str
    modelProvider: str
    hasApiKey: bool = False
    baseUrl: Optional[str] = None
    region: Optional[str] = None


class ReflectionsRequest(BaseModel):
    """Request model for reflection formatting."""
    reflections: Dict[str, Any]
    onlyStyle: bool = False
    onlyContent: bool = False


class ArtifactRequest(BaseModel):
    """Request model for artifact formatting."""
    content: Dict[str, Any]
    shortenContent: bool = False
    template: Optional[str] = None


class ContextDocumentsRequest(BaseModel):
    """Request model for context document messages."""
    config: Dict[str, Any]
    documents: Optional[List[ContextDocument]] = None
