"""
Core module for the wardrobe backend.
Contains exception handling shared by the routers.
"""
from .exceptions import (
    WardrobeException,
    NotFoundError,
    ValidationError,
    RecommendationError,
    ErrorResponse,
    wardrobe_exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
    generic_exception_handler,
    register_exception_handlers,
)

__all__ = [
    "WardrobeException",
    "NotFoundError",
    "ValidationError",
    "RecommendationError",
    "ErrorResponse",
    "wardrobe_exception_handler",
    "http_exception_handler",
    "request_validation_exception_handler",
    "generic_exception_handler",
    "register_exception_handlers",
]
