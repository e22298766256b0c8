"""Application queries (CQRS read side).

Usage:
    from clientgallery.application.queries import GetGallery, ListGalleries
"""

from clientgallery.application.queries.client_queries import (
    GetClient,
    GetClientByAccessKey,
    ListClients,
)
from clientgallery.application.queries.gallery_queries import (
    GetGallery,
    GetGalleryBySlug,
    GetGalleryStatistics,
    ListGalleries,
)
from clientgallery.application.queries.image_queries import (
    GetGalleryRatingSummary,
    ListGalleryImages,
    ListImageRatings,
)

__all__ = [
    "GetClient",
    "GetClientByAccessKey",
    "GetGallery",
    "GetGalleryBySlug",
    "GetGalleryRatingSummary",
    "GetGalleryStatistics",
    "ListClients",
    "ListGalleries",
    "ListGalleryImages",
    "ListImageRatings",
]
