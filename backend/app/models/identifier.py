"""Identifier ORM — an external-system identifier (ISBN, Wikidata ID, ...) of an entity.

Invariants:
    - Always belongs to an Entity (entity_bbid FK) and an IdentifierType
    - value is stored verbatim; no per-type normalisation at this layer
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class IdentifierType(Base):
    __tablename__ = "identifier_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)


class Identifier(Base):
    __tablename__ = "identifiers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    entity_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("identifier_types.id"), nullable=False,
    )
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    entity: Mapped["Entity"] = relationship(
        "Entity", back_populates="identifiers",
    )
    type: Mapped["IdentifierType"] = relationship("IdentifierType")
