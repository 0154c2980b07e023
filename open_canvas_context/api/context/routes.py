"""
FastAPI routes for prompt context assembly.
"""
from fastapi import APIRouter, Depends
from open_canvas_context.api.dependencies import get_settings
from open_canvas_context.api.context.models import (
    ArtifactRequest,
    ContextDocumentsRequest,
    ModelConfigRequest,
    ModelConfigResponse,
    ReflectionsRequest,
)
from open_canvas_context.api.context.service import (
    build_context_messages,
    render_artifact,
    render_reflections,
    resolve_model_config,
)
from open_canvas_context.core.settings import ProviderSettings

router = APIRouter()


@router.post("/model-config", response_model=ModelConfigResponse)
async def model_config(
    request: ModelConfigRequest,
    settings: ProviderSettings = Depends(get_settings),
):
    """Resolve the provider for the configured model."""
    return resolve_model_config(request.config, settings)


@router.post("/reflections")
async def reflections(request: ReflectionsRequest):
    """Format reflections for a prompt."""
    return render_reflections(
        request.reflections,
        only_style=request.onlyStyle,
        only_content=request.onlyContent,
    )


@router.post("/artifact")
async def artifact(request: ArtifactRequest):
    """Format artifact content for a prompt."""
    return render_artifact(
        request.content,
        shorten_content=request.shortenContent,
        template=request.template,
    )


@router.post("/documents")
async def documents(
    request: ContextDocumentsRequest,
    settings: ProviderSettings = Depends(get_settings),
):
    """Build the context document message for the configured model."""
    return await build_context_messages(request.config, request.documents, settings)
