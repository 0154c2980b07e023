"""
Session lookup against Supabase auth.
"""
import logging
from typing import Any, Dict, Optional
import httpx
from langchain_core.runnables import RunnableConfig

from open_canvas_context.core.settings import ProviderSettings

logger = logging.getLogger(__name__)

AUTH_TIMEOUT_SECONDS = 10.0


async def get_user_from_config(
    config: RunnableConfig,
    settings: Optional[ProviderSettings] = None,
) -> Optional[Dict[str, Any]]:
    """Return the Supabase user owning ``configurable.supabase_session``.

    Returns None when Supabase is not configured, no access token was sent,
    or Supabase rejects the token.
    """
    settings = settings or ProviderSettings.from_env()
    if not settings.supabase_url or not settings.supabase_anon_key:
        return None

    configurable = config.get("configurable", {}) if config else {}
    session = configurable.get("supabase_session") or {}
    access_token = session.get("access_token")
    if not access_token:
        return None

    url = f"{settings.supabase_url.rstrip('/')}/auth/v1/user"
    headers = {
        "apikey": settings.supabase_anon_key,
        "Authorization": f"Bearer {access_token}",
    }
    async with httpx.AsyncClient(timeout=AUTH_TIMEOUT_SECONDS) as client:
        response = await client.get(url, headers=headers)

    if response.status_code != 200:
        logger.warning("Supabase rejected session token (status %s)", response.status_code)
        return None
    return response.json() or None
