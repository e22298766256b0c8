"""Domain protocols (ports).

Usage:
    from clientgallery.domain.protocols import GalleryRepository, LoggerProtocol
"""

from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import (
    ImageRepository,
    RatingRepository,
)
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ClientRepository",
    "GalleryRepository",
    "ImageRepository",
    "LoggerProtocol",
    "RatingRepository",
]
