"""
App package - Application configuration, errors and the composition point.
Contains settings, exceptions and the container that binds abstractions
to concrete implementations.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    PaymentDeclinedError,
    ConfigurationError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "PaymentDeclinedError",
    "ConfigurationError",
]
