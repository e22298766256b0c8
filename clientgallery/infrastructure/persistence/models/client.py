"""Client database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from clientgallery.infrastructure.persistence.base import BaseMutableModel


class ClientModel(BaseMutableModel):
    """Client database model.

    Indexes:
        - email: UNIQUE - login and duplicate detection
        - access_key: UNIQUE - gallery access lookup
        - status: filter by account state
    """

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    access_key: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        comment="Random hex key the client uses to open its galleries",
    )
    status: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        default="pending_verification",
        index=True,
        comment="active, inactive, blocked, pending_verification",
    )
