"""ORM Models — SQLAlchemy declarative models for the catalogue.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entity is the aggregate root; aliases, identifiers and relationships hang off a BBID

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.lookup_tables import Area, AuthorType, Gender, Language  # noqa: F401
from app.models.entity import (  # noqa: F401
    Entity, Author, Edition, EditionGroup, Work, Publisher,
)
from app.models.alias import Alias  # noqa: F401
from app.models.identifier import Identifier, IdentifierType  # noqa: F401
from app.models.relationship import Relationship, RelationshipType  # noqa: F401
