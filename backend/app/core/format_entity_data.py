"""Entity Formatters — pure projections of loaded entities into response payloads.

Invariants:
    - Never touch the database: every relation read here must be eager-loaded
      by the caller (see services/entity_loader.py relation lists)
    - Never raise not-found; a missing optional relation projects to None
    - Output order follows the ORM collection order (primary key), so identical
      lookups produce identical JSON

Design Decisions:
    - Return Pydantic schemas rather than dicts: FastAPI serializes by alias,
      and tests can assert on attributes
"""

from app.core.domain_types import RelationshipDirection
from app.schemas.entity import (
    AliasItem, Aliases, AuthorDetail, DefaultAlias,
    IdentifierItem, Identifiers, RelationshipItem, Relationships,
)


def _name_of(value, attribute: str = "name") -> str | None:
    return getattr(value, attribute) if value is not None else None


def get_default_alias(entity) -> DefaultAlias | None:
    """Project the entity's default alias, or None when it has none."""
    alias = entity.default_alias
    if alias is None:
        return None
    return DefaultAlias(
        alias_language=_name_of(alias.language, "iso_code_3"),
        name=alias.name,
        primary=alias.primary,
        sort_name=alias.sort_name,
    )


def get_author_basic_info(author) -> AuthorDetail:
    """Flatten an Author and its lookup relations into AuthorDetail.

    Requires default_alias.language, author_type, gender, begin_area and
    end_area to be loaded.
    """
    return AuthorDetail(
        bbid=str(author.bbid),
        begin_area=_name_of(author.begin_area),
        begin_date=author.begin_date,
        default_alias=get_default_alias(author),
        disambiguation=author.disambiguation,
        end_area=_name_of(author.end_area),
        end_date=author.end_date,
        ended=bool(author.ended),
        gender=_name_of(author.gender),
        type=_name_of(author.author_type, "label"),
    )


def get_entity_aliases(entity) -> Aliases:
    return Aliases(
        bbid=str(entity.bbid),
        aliases=[
            AliasItem(
                language=_name_of(alias.language, "iso_code_3"),
                name=alias.name,
                primary=alias.primary,
                sort_name=alias.sort_name,
            )
            for alias in entity.aliases
        ],
    )


def get_entity_identifiers(entity) -> Identifiers:
    return Identifiers(
        bbid=str(entity.bbid),
        identifiers=[
            IdentifierItem(type=identifier.type.label, value=identifier.value)
            for identifier in entity.identifiers
        ],
    )


def get_entity_relationships(entity) -> Relationships:
    """List every relationship of the entity as seen from its side.

    A relationship whose source is the entity is ``forward`` and shows the
    type's link phrase; otherwise it is ``backward`` with the reverse phrase.
    """
    items = []
    for rel in entity.relationships:
        forward = rel.source_bbid == entity.bbid
        items.append(RelationshipItem(
            direction=(
                RelationshipDirection.FORWARD.value if forward
                else RelationshipDirection.BACKWARD.value
            ),
            id=rel.id,
            link_phrase=(
                rel.type.link_phrase if forward
                else rel.type.reverse_link_phrase
            ),
            relationship_type_id=rel.type.id,
            relationship_type_name=rel.type.label,
            source_bbid=str(rel.source_bbid),
            source_entity_type=rel.type.source_entity_type,
            target_bbid=str(rel.target_bbid),
            target_entity_type=rel.type.target_entity_type,
        ))
    return Relationships(bbid=str(entity.bbid), relationships=items)
