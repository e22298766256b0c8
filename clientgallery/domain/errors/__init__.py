"""Domain errors.

Usage:
    from clientgallery.domain.errors import GalleryError, DuplicateRecordError
"""

from clientgallery.domain.errors.client_error import ClientError
from clientgallery.domain.errors.duplicate_record_error import DuplicateRecordError
from clientgallery.domain.errors.gallery_error import GalleryError
from clientgallery.domain.errors.image_error import ImageError, RatingError

__all__ = [
    "ClientError",
    "DuplicateRecordError",
    "GalleryError",
    "ImageError",
    "RatingError",
]
