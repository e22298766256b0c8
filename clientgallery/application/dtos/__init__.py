"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers so that
callers never hold live domain entities.

Usage:
    from clientgallery.application.dtos import GalleryResult, RatingSummary
"""

from clientgallery.application.dtos.client_dtos import (
    ClientListResult,
    ClientResult,
    CreatedClient,
)
from clientgallery.application.dtos.gallery_dtos import (
    GalleryListResult,
    GalleryResult,
    GalleryStatistics,
)
from clientgallery.application.dtos.image_dtos import (
    ImageResult,
    RatingResult,
    RatingSummary,
)

__all__ = [
    "ClientListResult",
    "ClientResult",
    "CreatedClient",
    "GalleryListResult",
    "GalleryResult",
    "GalleryStatistics",
    "ImageResult",
    "RatingResult",
    "RatingSummary",
]
