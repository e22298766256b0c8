"""Application-layer failure factories.

Usage:
    from clientgallery.application.errors import gallery_not_found, slug_taken
"""

from clientgallery.application.errors.handler_errors import (
    client_not_found,
    email_taken,
    gallery_not_editable,
    gallery_not_found,
    image_not_found,
    invalid_field,
    invalid_transition,
    not_owned,
    slug_taken,
)

__all__ = [
    "client_not_found",
    "email_taken",
    "gallery_not_editable",
    "gallery_not_found",
    "image_not_found",
    "invalid_field",
    "invalid_transition",
    "not_owned",
    "slug_taken",
]
