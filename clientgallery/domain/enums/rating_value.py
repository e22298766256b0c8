"""Client verdicts on an image.

Usage:
    from clientgallery.domain.enums import RatingValue

    RateImage(image_id=3, client_id=1, rating=RatingValue.FAVORITE, score=9)
"""

from enum import Enum


class RatingValue(str, Enum):
    """Verdict a client gives an image during selection."""

    SELECTED = "selected"
    REJECTED = "rejected"
    FAVORITE = "favorite"
    MAYBE = "maybe"

    @classmethod
    def values(cls) -> list[str]:
        """Get all rating values as strings."""
        return [rating.value for rating in cls]

    @classmethod
    def positive_values(cls) -> list["RatingValue"]:
        """Ratings that mark an image as wanted by the client.

        Returns:
            list[RatingValue]: SELECTED and FAVORITE.
        """
        return [cls.SELECTED, cls.FAVORITE]
