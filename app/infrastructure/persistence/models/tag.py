"""Tag ORM model. Shared lookup table of free-text labels."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.shared.utils.generators import generate_cuid


class Tag(Base):
    """Tag label. Table: tags.

    Names are stored in the casing first submitted. Uniqueness is
    case-insensitive (unique index on lower(name)), so "AI" and "ai" are the
    same tag. Rows are created lazily and never updated or deleted by the
    tag service.
    """

    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


Index("uq_tags_name_lower", func.lower(Tag.name), unique=True)
