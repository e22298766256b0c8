"""Image and rating repository implementations.

SQLAlchemy implementations of the ImageRepository and RatingRepository
protocols. Ratings are removed explicitly together with their images so
deletes behave the same on databases without foreign key enforcement.
"""

from datetime import UTC, datetime

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clientgallery.domain.entities.image import Image, Rating
from clientgallery.domain.enums.image_status import ImageStatus
from clientgallery.domain.enums.rating_value import RatingValue
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.infrastructure.persistence.integrity import is_unique_violation
from clientgallery.infrastructure.persistence.models.image import ImageModel, RatingModel


class ImageRepository:
    """SQLAlchemy implementation of ImageRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, image_id: int) -> Image | None:
        model = await self._session.get(ImageModel, image_id)
        return None if model is None else self._to_entity(model)

    async def list_by_gallery(
        self, gallery_id: int, *, limit: int | None = None, offset: int = 0
    ) -> list[Image]:
        """List a gallery's images by sort_order, then ID."""
        stmt = (
            select(ImageModel)
            .where(ImageModel.gallery_id == gallery_id)
            .order_by(ImageModel.sort_order, ImageModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def next_sort_order(self, gallery_id: int) -> int:
        stmt = select(func.max(ImageModel.sort_order)).where(
            ImageModel.gallery_id == gallery_id
        )
        result = await self._session.execute(stmt)
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def save(self, image: Image) -> Image:
        """Save an image (create or update).

        Returns:
            The entity, with ``id`` assigned on insert.

        Raises:
            DuplicateRecordError: If the filename already exists in the gallery.
        """
        existing = None
        if image.id is not None:
            existing = await self._session.get(ImageModel, image.id)

        if existing is None:
            model = self._to_model(image)
            self._session.add(model)
        else:
            model = existing
            model.filename = image.filename
            model.original_filename = image.original_filename
            model.title = image.title
            model.description = image.description
            model.alt_text = image.alt_text
            model.file_size = image.file_size
            model.mime_type = image.mime_type
            model.width = image.width
            model.height = image.height
            model.sort_order = image.sort_order
            model.status = image.status.value
            model.is_featured = image.is_featured
            model.image_metadata = dict(image.metadata)
            model.updated_at = image.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError("Image", "filename") from e
            raise

        image.id = model.id
        return image

    async def clear_featured(self, gallery_id: int) -> None:
        """Unset is_featured on every image of the gallery."""
        stmt = select(ImageModel).where(
            ImageModel.gallery_id == gallery_id,
            ImageModel.is_featured.is_(True),
        )
        result = await self._session.execute(stmt)
        now = datetime.now(UTC)
        for model in result.scalars().all():
            model.is_featured = False
            model.updated_at = now
        await self._session.flush()

    async def delete(self, image_id: int) -> bool:
        """Delete an image and its ratings. Returns True if it existed."""
        await self._session.execute(
            delete(RatingModel).where(RatingModel.image_id == image_id)
        )
        result = await self._session.execute(
            delete(ImageModel).where(ImageModel.id == image_id)
        )
        return result.rowcount > 0

    async def delete_by_gallery(self, gallery_id: int) -> int:
        """Delete all images of a gallery and their ratings.

        Returns:
            Number of images deleted.
        """
        image_ids = select(ImageModel.id).where(ImageModel.gallery_id == gallery_id)
        await self._session.execute(
            delete(RatingModel).where(RatingModel.image_id.in_(image_ids))
        )
        result = await self._session.execute(
            delete(ImageModel).where(ImageModel.gallery_id == gallery_id)
        )
        return result.rowcount

    def _to_entity(self, model: ImageModel) -> Image:
        """Map database model to domain entity."""
        return Image(
            id=model.id,
            gallery_id=model.gallery_id,
            filename=model.filename,
            original_filename=model.original_filename,
            title=model.title,
            description=model.description,
            alt_text=model.alt_text,
            file_size=model.file_size,
            mime_type=model.mime_type,
            width=model.width,
            height=model.height,
            sort_order=model.sort_order,
            status=ImageStatus(model.status),
            is_featured=model.is_featured,
            metadata=dict(model.image_metadata or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Image) -> ImageModel:
        """Map domain entity to database model."""
        return ImageModel(
            gallery_id=entity.gallery_id,
            filename=entity.filename,
            original_filename=entity.original_filename,
            title=entity.title,
            description=entity.description,
            alt_text=entity.alt_text,
            file_size=entity.file_size,
            mime_type=entity.mime_type,
            width=entity.width,
            height=entity.height,
            sort_order=entity.sort_order,
            status=entity.status.value,
            is_featured=entity.is_featured,
            image_metadata=dict(entity.metadata),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class RatingRepository:
    """SQLAlchemy implementation of RatingRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_image_and_client(
        self, image_id: int, client_id: int
    ) -> Rating | None:
        stmt = select(RatingModel).where(
            RatingModel.image_id == image_id,
            RatingModel.client_id == client_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def list_by_image(self, image_id: int) -> list[Rating]:
        stmt = (
            select(RatingModel)
            .where(RatingModel.image_id == image_id)
            .order_by(RatingModel.updated_at.desc(), RatingModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def rating_distribution(self, gallery_id: int) -> dict[RatingValue, int]:
        """Count ratings per value over all images of a gallery."""
        stmt = (
            select(RatingModel.rating, func.count())
            .join(ImageModel, ImageModel.id == RatingModel.image_id)
            .where(ImageModel.gallery_id == gallery_id)
            .group_by(RatingModel.rating)
        )
        result = await self._session.execute(stmt)
        distribution = {value: 0 for value in RatingValue}
        for value, count in result.all():
            distribution[RatingValue(value)] = count
        return distribution

    async def average_score(self, gallery_id: int) -> float | None:
        stmt = (
            select(func.avg(RatingModel.score))
            .join(ImageModel, ImageModel.id == RatingModel.image_id)
            .where(ImageModel.gallery_id == gallery_id)
        )
        result = await self._session.execute(stmt)
        average = result.scalar_one_or_none()
        return None if average is None else float(average)

    async def save(self, rating: Rating) -> Rating:
        """Save a rating (create or update).

        Raises:
            DuplicateRecordError: If the client already rated the image.
        """
        existing = None
        if rating.id is not None:
            existing = await self._session.get(RatingModel, rating.id)

        if existing is None:
            model = self._to_model(rating)
            self._session.add(model)
        else:
            model = existing
            model.rating = rating.rating.value
            model.score = rating.score
            model.comment = rating.comment
            model.updated_at = rating.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError("Rating", "image_id, client_id") from e
            raise

        rating.id = model.id
        return rating

    def _to_entity(self, model: RatingModel) -> Rating:
        """Map database model to domain entity."""
        return Rating(
            id=model.id,
            image_id=model.image_id,
            client_id=model.client_id,
            rating=RatingValue(model.rating),
            score=model.score,
            comment=model.comment,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Rating) -> RatingModel:
        """Map domain entity to database model."""
        return RatingModel(
            image_id=entity.image_id,
            client_id=entity.client_id,
            rating=entity.rating.value,
            score=entity.score,
            comment=entity.comment,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
