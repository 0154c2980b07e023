"""
FastAPI routes for the model picker.
"""
from fastapi import APIRouter, Depends
from open_canvas_context.api.dependencies import get_settings
from open_canvas_context.core.models import DEFAULT_MODEL_CONFIG, DEFAULT_MODEL_NAME, available_models
from open_canvas_context.core.settings import ProviderSettings

router = APIRouter()


@router.get("/list")
async def get_models(settings: ProviderSettings = Depends(get_settings)):
    """List the models this deployment can resolve.

    Bedrock models are only listed when Bedrock routing is enabled.
    """
    return {
        "models": available_models(include_bedrock=settings.enable_bedrock),
        "defaultModelName": DEFAULT_MODEL_NAME,
        "defaultModelConfig": DEFAULT_MODEL_CONFIG,
    }
