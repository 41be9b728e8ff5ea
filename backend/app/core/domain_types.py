"""Domain Types — entity type names, BBID syntax check and browse parameter mapping.

Invariants:
    - A BBID is a canonical UUID string; is_valid_bbid accepts any letter case
    - EntityType values match the ORM discriminator stored in entities.type
    - Browse parameter names are kebab-case; model names are PascalCase

Design Decisions:
    - BBIDs stay plain strings at the HTTP edge; uuid.UUID only inside queries
    - str Enums: compare and serialize as plain strings
"""

import re
from enum import Enum


# ─── Identity Types ──────────────────────────────────────────────

_BBID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_bbid(value: object) -> bool:
    """True if value is a hyphenated 8-4-4-4-12 hex UUID string."""
    return isinstance(value, str) and bool(_BBID_PATTERN.fullmatch(value))


# ─── Enums ───────────────────────────────────────────────────────

class EntityType(str, Enum):
    """Catalogued entity kinds — maps to the `type` discriminator column."""
    AUTHOR = "Author"
    EDITION = "Edition"
    EDITION_GROUP = "EditionGroup"
    WORK = "Work"
    PUBLISHER = "Publisher"


class RelationshipDirection(str, Enum):
    """Side of a relationship the viewed entity sits on."""
    FORWARD = "forward"
    BACKWARD = "backward"


def model_type_for_parameter(parameter: str) -> EntityType:
    """Map a browse query parameter name to its entity type.

    ``edition-group`` becomes ``EditionGroup``; unknown names raise ValueError.
    """
    pascal = "".join(part.capitalize() for part in re.split(r"[-_]", parameter))
    return EntityType(pascal)
