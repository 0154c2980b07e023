"""
Custom exceptions for the application.
"""
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for application errors.

    ``context`` carries machine-readable fields (e.g. the offending model name)
    that are returned to API clients next to the message.
    """
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Validation error exception."""
    def __init__(self, message: str, detail: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, detail=detail, context=context)


class InvalidArgumentError(ValidationError):
    """Mutually exclusive or malformed arguments."""


class MissingConfigError(ValidationError):
    """A required `configurable` field is absent."""


class UnknownProviderError(ValidationError):
    """No provider matches the requested model name."""
    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(
            "Unknown model provider",
            detail=f"No provider for model '{model_name}'",
            context={"model_name": model_name},
        )


class UnsupportedDocumentTypeError(AppException):
    """Context document MIME type cannot be sent to the provider."""
    def __init__(self, document_type: str):
        self.document_type = document_type
        super().__init__(
            f"Unsupported document type: {document_type}",
            status_code=415,
            context={"document_type": document_type},
        )


class UnauthorizedError(AppException):
    """Restricted model requested without a privileged user."""
    def __init__(self, message: str, model_name: Optional[str] = None):
        self.model_name = model_name
        super().__init__(
            message,
            status_code=403,
            context={"model_name": model_name} if model_name else None,
        )
