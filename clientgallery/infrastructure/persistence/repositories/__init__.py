"""SQLAlchemy repository implementations.

Each class satisfies the matching protocol in
``clientgallery.domain.protocols`` structurally (no inheritance).
"""

from clientgallery.infrastructure.persistence.repositories.client_repository import (
    ClientRepository,
)
from clientgallery.infrastructure.persistence.repositories.gallery_repository import (
    GalleryRepository,
)
from clientgallery.infrastructure.persistence.repositories.image_repository import (
    ImageRepository,
    RatingRepository,
)

__all__ = [
    "ClientRepository",
    "GalleryRepository",
    "ImageRepository",
    "RatingRepository",
]
