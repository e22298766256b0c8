"""Common error classes returned by command and query handlers.

Error Types:
- ValidationError: Input rejected by a business rule at handling time
- NotFoundError: Gallery, client or image does not exist
- ConflictError: Duplicate slug/email/filename or refused state change
- AuthorizationError: Client acting on a gallery it does not own

Usage:
    from clientgallery.core.errors import NotFoundError
    from clientgallery.core.enums import ErrorCode
    from clientgallery.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.GALLERY_NOT_FOUND,
        message="Gallery not found",
        resource_type="Gallery",
        resource_id=str(gallery_id),
    ))
"""

from dataclasses import dataclass

from clientgallery.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Gallery, Client, Image).
        resource_id: ID or slug of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (slug, email, filename).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (client acting outside its own galleries).

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None
