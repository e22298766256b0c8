"""Gallery repository implementation.

SQLAlchemy implementation of the GalleryRepository protocol. Maps between
the Gallery domain entity and GalleryModel.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.value_objects.gallery_slug import GallerySlug
from clientgallery.domain.value_objects.gallery_status import GalleryStatus
from clientgallery.infrastructure.persistence.integrity import is_unique_violation
from clientgallery.infrastructure.persistence.models.gallery import GalleryModel


class GalleryRepository:
    """SQLAlchemy implementation of GalleryRepository protocol.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - Flushes on save; committing is the session owner's job
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, gallery_id: int) -> Gallery | None:
        """Find gallery by ID.

        Returns:
            Gallery entity if found, None otherwise.
        """
        model = await self._session.get(GalleryModel, gallery_id)
        if model is None:
            return None
        return self._to_entity(model)

    async def find_by_slug(self, slug: str) -> Gallery | None:
        """Find gallery by slug.

        Returns:
            Gallery entity if found, None otherwise.
        """
        stmt = select(GalleryModel).where(GalleryModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_entity(model)

    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        """Check if a gallery other than ``exclude_id`` uses the slug."""
        stmt = select(GalleryModel.id).where(GalleryModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(GalleryModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_galleries(
        self,
        *,
        client_id: int | None = None,
        status: GalleryStatus | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Gallery]:
        """List galleries newest first, optionally filtered by client and status."""
        stmt = self._filtered(select(GalleryModel), client_id, status)
        stmt = (
            stmt.order_by(GalleryModel.created_at.desc(), GalleryModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_galleries(
        self,
        *,
        client_id: int | None = None,
        status: GalleryStatus | None = None,
    ) -> int:
        """Count galleries matching the list filters."""
        stmt = self._filtered(
            select(func.count()).select_from(GalleryModel), client_id, status
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def count_by_status(
        self, client_id: int | None = None
    ) -> dict[GalleryStatus, int]:
        """Count galleries per status."""
        stmt = self._filtered(
            select(GalleryModel.status, func.count()), client_id, None
        ).group_by(GalleryModel.status)
        result = await self._session.execute(stmt)
        counts = {status: 0 for status in GalleryStatus}
        for status, count in result.all():
            counts[GalleryStatus(status)] = count
        return counts

    async def total_image_count(self, client_id: int | None = None) -> int:
        """Sum of image counts over the client's (or all) galleries."""
        stmt = self._filtered(
            select(func.coalesce(func.sum(GalleryModel.image_count), 0)),
            client_id,
            None,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def next_sort_order(self, client_id: int) -> int:
        """Next sort position among the client's galleries."""
        stmt = select(func.max(GalleryModel.sort_order)).where(
            GalleryModel.client_id == client_id
        )
        result = await self._session.execute(stmt)
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def save(self, gallery: Gallery) -> Gallery:
        """Save a gallery (create or update).

        Args:
            gallery: Gallery entity to save.

        Returns:
            The entity, with ``id`` assigned on insert.

        Raises:
            DuplicateRecordError: If the slug collides with another gallery.
            IntegrityError: Any other constraint violation (e.g. unknown client).
        """
        existing = None
        if gallery.id is not None:
            existing = await self._session.get(GalleryModel, gallery.id)

        if existing is None:
            model = self._to_model(gallery)
            self._session.add(model)
        else:
            model = existing
            model.name = gallery.name
            model.slug = gallery.slug.value
            model.description = gallery.description
            model.status = gallery.status.value
            model.client_id = gallery.client_id
            model.settings = dict(gallery.settings)
            model.image_count = gallery.image_count
            model.sort_order = gallery.sort_order
            model.updated_at = gallery.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError("Gallery", "slug") from e
            raise

        gallery.id = model.id
        return gallery

    async def delete(self, gallery_id: int) -> bool:
        """Delete a gallery row. Returns True if it existed."""
        result = await self._session.execute(
            delete(GalleryModel).where(GalleryModel.id == gallery_id)
        )
        return result.rowcount > 0

    @staticmethod
    def _filtered(stmt, client_id: int | None, status: GalleryStatus | None):
        if client_id is not None:
            stmt = stmt.where(GalleryModel.client_id == client_id)
        if status is not None:
            stmt = stmt.where(GalleryModel.status == status.value)
        return stmt

    def _to_entity(self, model: GalleryModel) -> Gallery:
        """Map database model to domain entity."""
        return Gallery(
            id=model.id,
            name=model.name,
            slug=GallerySlug(model.slug),
            description=model.description,
            status=GalleryStatus(model.status),
            client_id=model.client_id,
            settings=dict(model.settings or {}),
            image_count=model.image_count,
            sort_order=model.sort_order,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Gallery) -> GalleryModel:
        """Map domain entity to database model."""
        return GalleryModel(
            name=entity.name,
            slug=entity.slug.value,
            description=entity.description,
            status=entity.status.value,
            client_id=entity.client_id,
            settings=dict(entity.settings),
            image_count=entity.image_count,
            sort_order=entity.sort_order,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
