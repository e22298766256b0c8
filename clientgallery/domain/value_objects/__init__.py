"""Domain value objects.

Usage:
    from clientgallery.domain.value_objects import GallerySlug, GalleryStatus
"""

from clientgallery.domain.value_objects.email import Email
from clientgallery.domain.value_objects.gallery_slug import (
    GallerySlug,
    InvalidSlugError,
    SlugExhaustedError,
)
from clientgallery.domain.value_objects.gallery_status import (
    GalleryStatus,
    InvalidStatusError,
)

__all__ = [
    "Email",
    "GallerySlug",
    "GalleryStatus",
    "InvalidSlugError",
    "InvalidStatusError",
    "SlugExhaustedError",
]
