"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from clientgallery.infrastructure.persistence.models.client import ClientModel
from clientgallery.infrastructure.persistence.models.gallery import GalleryModel
from clientgallery.infrastructure.persistence.models.image import ImageModel, RatingModel

__all__ = ["ClientModel", "GalleryModel", "ImageModel", "RatingModel"]
