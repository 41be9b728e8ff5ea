"""Relationship ORM — typed, directed links between two catalogued entities.

Invariants:
    - Connects two Entities (source_bbid -> target_bbid)
    - RelationshipType fixes the entity types on each side and both link phrases

Design Decisions:
    - No unique constraint on (source, target, type): the same pair may be
      linked more than once with different types
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class RelationshipType(Base):
    __tablename__ = "relationship_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    link_phrase: Mapped[str] = mapped_column(String(255), nullable=False)
    reverse_link_phrase: Mapped[str] = mapped_column(
        String(255), nullable=False,
    )
    source_entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    target_entity_type: Mapped[str] = mapped_column(String(20), nullable=False)


class Relationship(Base):
    __tablename__ = "relationships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("relationship_types.id"), nullable=False,
    )
    source_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    target_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    type: Mapped["RelationshipType"] = relationship("RelationshipType")
    source: Mapped["Entity"] = relationship(
        "Entity", foreign_keys=[source_bbid],
        back_populates="outgoing_relationships",
    )
    target: Mapped["Entity"] = relationship(
        "Entity", foreign_keys=[target_bbid],
        back_populates="incoming_relationships",
    )
