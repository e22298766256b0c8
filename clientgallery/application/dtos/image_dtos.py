"""Image and rating DTOs (Data Transfer Objects)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from clientgallery.domain.entities.image import Image, Rating


@dataclass
class ImageResult:
    """Single image result DTO."""

    id: int
    gallery_id: int
    filename: str
    original_filename: str
    title: str | None
    description: str | None
    alt_text: str | None
    file_size: int
    mime_type: str
    width: int
    height: int
    sort_order: int
    status: str
    is_featured: bool
    metadata: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_entity(cls, image: Image) -> "ImageResult":
        """Map a persisted Image entity to its DTO."""
        assert image.id is not None, "image must be saved before mapping"
        return cls(
            id=image.id,
            gallery_id=image.gallery_id,
            filename=image.filename,
            original_filename=image.original_filename,
            title=image.title,
            description=image.description,
            alt_text=image.alt_text,
            file_size=image.file_size,
            mime_type=image.mime_type,
            width=image.width,
            height=image.height,
            sort_order=image.sort_order,
            status=image.status.value,
            is_featured=image.is_featured,
            metadata=dict(image.metadata),
            created_at=image.created_at,
        )


@dataclass
class RatingResult:
    """Single rating result DTO."""

    id: int
    image_id: int
    client_id: int
    rating: str
    score: int | None
    comment: str | None
    updated_at: datetime

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingResult":
        """Map a persisted Rating entity to its DTO."""
        assert rating.id is not None, "rating must be saved before mapping"
        return cls(
            id=rating.id,
            image_id=rating.image_id,
            client_id=rating.client_id,
            rating=rating.rating.value,
            score=rating.score,
            comment=rating.comment,
            updated_at=rating.updated_at,
        )


@dataclass
class RatingSummary:
    """Aggregated ratings of one gallery.

    Attributes:
        gallery_id: Summarized gallery.
        total_ratings: Number of ratings across all images.
        distribution: Count per rating value (every value present).
        average_score: Mean of given scores, None when no scores exist.
    """

    gallery_id: int
    total_ratings: int
    distribution: dict[str, int] = field(default_factory=dict)
    average_score: float | None = None
