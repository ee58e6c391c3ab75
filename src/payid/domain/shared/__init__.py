"""Shared domain components.

This module exports shared exceptions and utilities used across domain
boundaries.
"""

# Re-export all exceptions from the exceptions module
from payid.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from payid.domain.shared.time import utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    # Utilities
    "utc_now",
]
