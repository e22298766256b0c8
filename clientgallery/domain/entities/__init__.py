"""Domain entities.

Usage:
    from clientgallery.domain.entities import Client, Gallery, Image, Rating
"""

from clientgallery.domain.entities.client import Client
from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.entities.image import Image, Rating

__all__ = ["Client", "Gallery", "Image", "Rating"]
