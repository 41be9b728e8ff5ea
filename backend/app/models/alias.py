"""Alias ORM — a name variant of an entity in a given language.

Invariants:
    - Always belongs to an Entity (entity_bbid FK)
    - is_default marks the alias shown as the entity's name
    - primary marks the preferred alias for its language
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Alias(Base):
    __tablename__ = "aliases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    entity_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sort_name: Mapped[str] = mapped_column(String(255), nullable=False)
    language_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("languages.id"), nullable=True,
    )
    primary: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    entity: Mapped["Entity"] = relationship(
        "Entity", back_populates="aliases",
    )
    language: Mapped[Optional["Language"]] = relationship("Language")
