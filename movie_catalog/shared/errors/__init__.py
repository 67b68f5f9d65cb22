from .base import (
    AppError,
    AuthenticationError,
    DomainError,
    InfrastructureError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler
from .validation import format_pydantic_errors, raise_validation_error

__all__ = [
    "AppError",
    "AuthenticationError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
    "format_pydantic_errors",
    "handle_app_error",
    "raise_validation_error",
    "register_error_handler",
]
