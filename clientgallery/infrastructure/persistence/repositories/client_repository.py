"""Client repository implementation.

SQLAlchemy implementation of the ClientRepository protocol.
"""

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clientgallery.domain.entities.client import Client
from clientgallery.domain.enums.client_status import ClientStatus
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.value_objects.email import Email
from clientgallery.infrastructure.persistence.integrity import is_unique_violation
from clientgallery.infrastructure.persistence.models.client import ClientModel


class ClientRepository:
    """SQLAlchemy implementation of ClientRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, client_id: int) -> Client | None:
        model = await self._session.get(ClientModel, client_id)
        return None if model is None else self._to_entity(model)

    async def find_by_email(self, email: str) -> Client | None:
        return await self._find_one(ClientModel.email == email)

    async def find_by_access_key(self, access_key: str) -> Client | None:
        return await self._find_one(ClientModel.access_key == access_key)

    async def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        """Check if a client other than ``exclude_id`` uses the email."""
        stmt = select(ClientModel.id).where(ClientModel.email == email)
        if exclude_id is not None:
            stmt = stmt.where(ClientModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_clients(
        self,
        *,
        status: ClientStatus | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Client]:
        """List clients ordered by name, optionally filtered."""
        stmt = self._filtered(select(ClientModel), status, search)
        stmt = stmt.order_by(ClientModel.name, ClientModel.id).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_clients(
        self,
        *,
        status: ClientStatus | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._filtered(select(func.count()).select_from(ClientModel), status, search)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, client: Client) -> Client:
        """Save a client (create or update).

        Returns:
            The entity, with ``id`` assigned on insert.

        Raises:
            DuplicateRecordError: If email or access key collides.
        """
        existing = None
        if client.id is not None:
            existing = await self._session.get(ClientModel, client.id)

        if existing is None:
            model = self._to_model(client)
            self._session.add(model)
        else:
            model = existing
            model.name = client.name
            model.email = client.email.value
            model.company = client.company
            model.phone = client.phone
            model.website = client.website
            model.access_key = client.access_key
            model.status = client.status.value
            model.updated_at = client.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError("Client", "email") from e
            raise

        client.id = model.id
        return client

    async def delete(self, client_id: int) -> bool:
        result = await self._session.execute(
            delete(ClientModel).where(ClientModel.id == client_id)
        )
        return result.rowcount > 0

    async def _find_one(self, condition) -> Client | None:
        result = await self._session.execute(select(ClientModel).where(condition))
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    @staticmethod
    def _filtered(stmt, status: ClientStatus | None, search: str | None):
        if status is not None:
            stmt = stmt.where(ClientModel.status == status.value)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(ClientModel.name).like(pattern),
                    func.lower(ClientModel.email).like(pattern),
                    func.lower(ClientModel.company).like(pattern),
                )
            )
        return stmt

    def _to_entity(self, model: ClientModel) -> Client:
        """Map database model to domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            email=Email(model.email),
            company=model.company,
            phone=model.phone,
            website=model.website,
            access_key=model.access_key,
            status=ClientStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity to database model."""
        return ClientModel(
            name=entity.name,
            email=entity.email.value,
            company=entity.company,
            phone=entity.phone,
            website=entity.website,
            access_key=entity.access_key,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
