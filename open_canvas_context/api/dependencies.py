"""
Shared FastAPI dependencies.
"""
from fastapi import Request
from open_canvas_context.core.settings import ProviderSettings


def get_settings(request: Request) -> ProviderSettings:
    """Provider settings resolved at startup."""
    settings = getattr(request.app.state, "settings", None)
    return settings or ProviderSettings.from_env()
