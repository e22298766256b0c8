"""Core errors package.

Usage:
    from clientgallery.core.errors import DomainError, NotFoundError
"""

from clientgallery.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from clientgallery.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
]
