"""Domain enums.

Usage:
    from clientgallery.domain.enums import ClientStatus, ImageStatus, RatingValue
"""

from clientgallery.domain.enums.client_status import ClientStatus
from clientgallery.domain.enums.image_status import ImageStatus
from clientgallery.domain.enums.rating_value import RatingValue

__all__ = ["ClientStatus", "ImageStatus", "RatingValue"]
