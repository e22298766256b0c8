"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Authorization errors (RESOURCE_NOT_OWNED)
- Business rule violations (GALLERY_NOT_*, CLIENT_HAS_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_SLUG = "invalid_slug"
    INVALID_IMAGE_ORDER = "invalid_image_order"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    GALLERY_NOT_FOUND = "gallery_not_found"
    CLIENT_NOT_FOUND = "client_not_found"
    IMAGE_NOT_FOUND = "image_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    SLUG_ALREADY_EXISTS = "slug_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    IMAGE_ALREADY_EXISTS = "image_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Business rule violations
    GALLERY_NOT_EDITABLE = "gallery_not_editable"
    GALLERY_NOT_PUBLISHABLE = "gallery_not_publishable"
    GALLERY_NOT_PUBLISHED = "gallery_not_published"
    INVALID_STATUS_TRANSITION = "invalid_status_transition"
    CLIENT_HAS_GALLERIES = "client_has_galleries"
