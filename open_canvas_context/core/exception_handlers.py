"""
Global exception handlers for FastAPI.

Every error body has the shape ``{"error", "error_type", "detail", "status_code"}``;
context-assembly errors add a ``context`` object with the offending value
(``model_name``, ``document_type``).
"""
import logging
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from open_canvas_context.core.exceptions import AppException

logger = logging.getLogger(__name__)


def error_body(
    error: str,
    error_type: str,
    status_code: int,
    detail: Any = None,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    body = {
        "error": error,
        "error_type": error_type,
        "detail": detail if detail is not None else error,
        "status_code": status_code,
    }
    if context:
        body["context"] = context
    return body


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle resolver, formatter and document errors."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message,
        extra={"status_code": exc.status_code, **exc.context},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            exc.message, type(exc).__name__, exc.status_code, exc.detail, exc.context
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions (unknown routes, wrong methods)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), "HTTPException", exc.status_code),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies, e.g. a context document without ``type``."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning("Invalid request on %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(
            "Validation error",
            "RequestValidationError",
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        ),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected failures, e.g. PDF extraction errors or provider SDK errors."""
    logger.error(
        "Unhandled %s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "Internal server error",
            type(exc).__name__,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
