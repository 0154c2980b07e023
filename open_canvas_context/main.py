"""
FastAPI application exposing model configuration and prompt context helpers.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from open_canvas_context.api.context.routes import router as context_router
from open_canvas_context.api.models_routes import router as models_router
from open_canvas_context.core.exception_handlers import register_exception_handlers
from open_canvas_context.core.settings import ProviderSettings

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.settings = ProviderSettings.from_env()
    if not app.state.settings.supabase_url:
        logger.warning("NEXT_PUBLIC_SUPABASE_URL not set. Restricted models will be rejected.")
    yield


app = FastAPI(title="Open Canvas Context API", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(context_router, prefix="/api/context", tags=["context"])
app.include_router(models_router, prefix="/api/models", tags=["models"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
