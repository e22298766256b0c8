"""Gallery database model."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clientgallery.infrastructure.persistence.base import BaseMutableModel, IdType


class GalleryModel(BaseMutableModel):
    """Gallery database model.

    Fields:
        name: Display name
        slug: URL identifier (unique)
        description: Optional long text
        status: draft, published, archived
        client_id: Owning client
        settings: JSON display settings
        image_count: Denormalized number of images
        sort_order: Position among the client's galleries

    Indexes:
        - slug: UNIQUE - backs slug uniqueness under concurrent creates
        - idx_galleries_client_status: (client_id, status) - listings
    """

    __tablename__ = "galleries"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft", index=True
    )
    client_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    settings: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    image_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("idx_galleries_client_status", "client_id", "status"),)
