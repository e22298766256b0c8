"""Query handlers.

Usage:
    from clientgallery.application.queries.handlers import GetGalleryHandler
"""

from clientgallery.application.queries.handlers.client_query_handlers import (
    GetClientByAccessKeyHandler,
    GetClientHandler,
    ListClientsHandler,
)
from clientgallery.application.queries.handlers.gallery_query_handlers import (
    GetGalleryBySlugHandler,
    GetGalleryHandler,
    GetGalleryStatisticsHandler,
    ListGalleriesHandler,
)
from clientgallery.application.queries.handlers.image_query_handlers import (
    GetGalleryRatingSummaryHandler,
    ListGalleryImagesHandler,
    ListImageRatingsHandler,
)

__all__ = [
    "GetClientByAccessKeyHandler",
    "GetClientHandler",
    "GetGalleryBySlugHandler",
    "GetGalleryHandler",
    "GetGalleryRatingSummaryHandler",
    "GetGalleryStatisticsHandler",
    "ListClientsHandler",
    "ListGalleriesHandler",
    "ListGalleryImagesHandler",
    "ListImageRatingsHandler",
]
