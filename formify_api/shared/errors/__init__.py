from .base import AppError, DomainError, InternalError, ValidationError
from .http import handle_app_error, register_error_handler
from .internal import internal_errors

__all__ = [
    "AppError",
    "DomainError",
    "InternalError",
    "ValidationError",
    "handle_app_error",
    "internal_errors",
    "register_error_handler",
]
