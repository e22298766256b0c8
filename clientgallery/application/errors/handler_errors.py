"""Failure values shared by command and query handlers.

Handlers report expected failures as DomainError subclasses inside
``Failure``. These factories keep codes, resource types and messages
consistent across handlers.

Usage:
    from clientgallery.application.errors import gallery_not_found

    if gallery is None:
        return Failure(error=gallery_not_found(cmd.gallery_id))
"""

from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


def gallery_not_found(gallery_id: int | str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.GALLERY_NOT_FOUND,
        message="Gallery not found",
        resource_type="Gallery",
        resource_id=str(gallery_id),
    )


def client_not_found(client_id: int) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.CLIENT_NOT_FOUND,
        message="Client not found",
        resource_type="Client",
        resource_id=str(client_id),
    )


def image_not_found(image_id: int) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.IMAGE_NOT_FOUND,
        message="Image not found",
        resource_type="Image",
        resource_id=str(image_id),
    )


def slug_taken(slug: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.SLUG_ALREADY_EXISTS,
        message=f'Gallery slug "{slug}" is already in use',
        resource_type="Gallery",
        conflicting_field="slug",
    )


def email_taken(email: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message=f"A client with email {email} already exists",
        resource_type="Client",
        conflicting_field="email",
    )


def gallery_not_editable(gallery_id: int, reason: str) -> ConflictError:
    """Edit refused because of the gallery's status."""
    return ConflictError(
        code=ErrorCode.GALLERY_NOT_EDITABLE,
        message=reason,
        resource_type="Gallery",
        details={"gallery_id": str(gallery_id)},
    )


def invalid_transition(resource_type: str, reason: str) -> ConflictError:
    """State transition refused by the entity."""
    return ConflictError(
        code=ErrorCode.INVALID_STATUS_TRANSITION,
        message=reason,
        resource_type=resource_type,
        conflicting_field="status",
    )


def not_owned(resource_type: str, resource_id: int) -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.RESOURCE_NOT_OWNED,
        message=f"{resource_type} does not belong to this client",
        details={"resource_id": str(resource_id)},
    )


def invalid_field(field: str, message: str, code: ErrorCode = ErrorCode.VALIDATION_FAILED) -> ValidationError:
    return ValidationError(code=code, message=message, field=field)
