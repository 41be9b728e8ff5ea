"""Entity ORM — single-table polymorphic model for every catalogued entity.

Invariants:
    - bbid is the UUID primary key; type is the polymorphic discriminator
    - At most one alias per entity has is_default set (the default alias)
    - Author-only columns are nullable (single-table inheritance)
    - Relationship collections are ordered by id so projections are stable

Design Decisions:
    - Single-table inheritance: an untyped lookup by BBID returns the right
      subclass with all columns loaded, no extra joins in async context
    - Relationships split by direction: one FK column per collection keeps
      selectinload keyed on a single column
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import EntityType
from app.db.base import Base


class Entity(Base):
    """Catalogued entity — aggregate root for aliases, identifiers, relationships."""
    __tablename__ = "entities"

    bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    disambiguation: Mapped[str | None] = mapped_column(Text, nullable=True)

    aliases: Mapped[list["Alias"]] = relationship(
        "Alias", back_populates="entity", order_by="Alias.id",
    )
    default_alias: Mapped[Optional["Alias"]] = relationship(
        "Alias",
        primaryjoin="and_(Entity.bbid == Alias.entity_bbid, "
                    "Alias.is_default.is_(True))",
        uselist=False, viewonly=True,
    )
    identifiers: Mapped[list["Identifier"]] = relationship(
        "Identifier", back_populates="entity", order_by="Identifier.id",
    )
    outgoing_relationships: Mapped[list["Relationship"]] = relationship(
        "Relationship", foreign_keys="Relationship.source_bbid",
        back_populates="source", order_by="Relationship.id",
    )
    incoming_relationships: Mapped[list["Relationship"]] = relationship(
        "Relationship", foreign_keys="Relationship.target_bbid",
        back_populates="target", order_by="Relationship.id",
    )

    __mapper_args__ = {"polymorphic_on": "type"}

    @property
    def relationships(self) -> list["Relationship"]:
        """Both directions merged, ordered by relationship id."""
        return sorted(
            [*self.outgoing_relationships, *self.incoming_relationships],
            key=lambda rel: rel.id,
        )


class Author(Entity):
    """Person or group credited with creating works."""
    __mapper_args__ = {"polymorphic_identity": EntityType.AUTHOR.value}

    author_type_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("author_types.id"), nullable=True,
    )
    gender_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("genders.id"), nullable=True,
    )
    begin_area_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("areas.id"), nullable=True,
    )
    end_area_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("areas.id"), nullable=True,
    )
    # ISO 8601 partial dates: "1907", "1907-07" or "1907-07-07"
    begin_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    ended: Mapped[bool | None] = mapped_column(
        Boolean, nullable=True, default=False,
    )

    author_type: Mapped[Optional["AuthorType"]] = relationship("AuthorType")
    gender: Mapped[Optional["Gender"]] = relationship("Gender")
    begin_area: Mapped[Optional["Area"]] = relationship(
        "Area", foreign_keys=[begin_area_id],
    )
    end_area: Mapped[Optional["Area"]] = relationship(
        "Area", foreign_keys=[end_area_id],
    )


class Edition(Entity):
    __mapper_args__ = {"polymorphic_identity": EntityType.EDITION.value}


class EditionGroup(Entity):
    __mapper_args__ = {"polymorphic_identity": EntityType.EDITION_GROUP.value}


class Work(Entity):
    __mapper_args__ = {"polymorphic_identity": EntityType.WORK.value}


class Publisher(Entity):
    __mapper_args__ = {"polymorphic_identity": EntityType.PUBLISHER.value}


ENTITY_MODELS: dict[EntityType, type[Entity]] = {
    EntityType.AUTHOR: Author,
    EntityType.EDITION: Edition,
    EntityType.EDITION_GROUP: EditionGroup,
    EntityType.WORK: Work,
    EntityType.PUBLISHER: Publisher,
}
