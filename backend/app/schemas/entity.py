"""Entity Schemas — JSON projections of catalogued entities.

Invariants:
    - Wire keys are camelCase (alias_generator), except relationshipTypeID in
      browse payloads, which keeps its historical spelling
    - Every payload that describes a single entity carries its bbid
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for response payloads — camelCase on the wire, snake_case in code."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DefaultAlias(ApiModel):
    alias_language: str | None = None
    name: str
    primary: bool
    sort_name: str


class AuthorDetail(ApiModel):
    """Basic information of an Author entity."""
    bbid: str
    begin_area: str | None = None
    begin_date: str | None = None
    default_alias: DefaultAlias | None = None
    disambiguation: str | None = None
    end_area: str | None = None
    end_date: str | None = None
    ended: bool = False
    gender: str | None = None
    type: str | None = None


class AliasItem(ApiModel):
    language: str | None = None
    name: str
    primary: bool
    sort_name: str


class Aliases(ApiModel):
    bbid: str
    aliases: list[AliasItem] = []


class IdentifierItem(ApiModel):
    type: str
    value: str


class Identifiers(ApiModel):
    bbid: str
    identifiers: list[IdentifierItem] = []


class RelationshipItem(ApiModel):
    direction: Literal["forward", "backward"]
    id: int
    link_phrase: str
    relationship_type_id: int
    relationship_type_name: str
    source_bbid: str
    source_entity_type: str
    target_bbid: str
    target_entity_type: str


class Relationships(ApiModel):
    bbid: str
    relationships: list[RelationshipItem] = []


class BrowsedRelationship(ApiModel):
    relationship_type_id: int = Field(alias="relationshipTypeID")
    relationship_type: str


class RelatedAuthor(ApiModel):
    entity: AuthorDetail
    relationships: list[BrowsedRelationship] = []


class BrowsedAuthors(ApiModel):
    """Authors related to a seed entity, grouped per author."""
    bbid: str
    related_authors: list[RelatedAuthor] = []
