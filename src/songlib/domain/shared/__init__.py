"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from songlib.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from songlib.domain.shared.time import utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "ExternalServiceError",
    # Utilities
    "utc_now",
]
