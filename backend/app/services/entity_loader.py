"""Entity Loader — fetch one entity by BBID with its relations eagerly loaded.

Invariants:
    - A malformed BBID raises InvalidBBIDError (406) before any query runs
    - A missing entity raises EntityNotFoundError (404) with the caller's message
    - Every relation listed by the caller is loaded with selectinload; nothing
      is left for lazy loading (async sessions cannot lazy load)

Design Decisions:
    - Relations are dotted attribute paths ("default_alias.language") resolved
      against the model class, so a typo fails on the first request, loudly
    - populate_existing: an entity already in the identity map (e.g. seen as a
      relationship endpoint) still gets the requested relations loaded
"""

import logging
import uuid
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import EntityType, is_valid_bbid
from app.core.errors import EntityNotFoundError, InvalidBBIDError
from app.models.entity import ENTITY_MODELS, Entity
from app.services.pipeline import RequestContext, Stage

logger = logging.getLogger(__name__)

ALIASES_RELATIONS = ["aliases.language"]
IDENTIFIERS_RELATIONS = ["identifiers.type"]
RELATIONSHIPS_RELATIONS = [
    "outgoing_relationships.type",
    "incoming_relationships.type",
]


def build_load_options(model: type[Entity], relations: Sequence[str]) -> list:
    """Turn dotted relation paths into chained selectinload options."""
    options = []
    for path in relations:
        current = model
        option = None
        for name in path.split("."):
            attribute = getattr(current, name)
            option = (
                selectinload(attribute) if option is None
                else option.selectinload(attribute)
            )
            current = attribute.property.mapper.class_
        options.append(option)
    return options


async def fetch_entity(
    db: AsyncSession,
    entity_type: EntityType | None,
    bbid: str,
    relations: Sequence[str],
) -> Entity | None:
    """Load an entity of the given type (any type when None), or None."""
    model = ENTITY_MODELS[entity_type] if entity_type else Entity
    result = await db.execute(
        select(model)
        .where(model.bbid == uuid.UUID(bbid))
        .options(*build_load_options(model, relations))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


def make_entity_loader(
    entity_type: EntityType | None,
    relations: Sequence[str],
    error_message: str,
    is_browse: bool = False,
) -> Stage:
    """Build a stage that loads an entity onto context.entity.

    Lookup mode reads the ``bbid`` path parameter and restricts the query to
    ``entity_type``. Browse mode reads the BBID and model type recorded by the
    browse query validator instead.
    """
    relations = list(relations)
    if entity_type is not None:
        # Fail at route construction for unknown relation paths
        build_load_options(ENTITY_MODELS[entity_type], relations)

    async def load_entity(context: RequestContext) -> RequestContext:
        if is_browse:
            bbid, model_type = context.bbid, context.model_type
        else:
            bbid, model_type = context.path_params.get("bbid"), entity_type

        if not is_valid_bbid(bbid):
            logger.info(
                f"Rejected malformed BBID {bbid!r}", extra={"bbid": bbid},
            )
            raise InvalidBBIDError(bbid)

        entity = await fetch_entity(context.session, model_type, bbid, relations)
        if entity is None:
            logger.info(
                f"{error_message}: {bbid}",
                extra={
                    "bbid": bbid,
                    "entity_type": model_type.value if model_type else None,
                },
            )
            raise EntityNotFoundError(
                error_message, bbid, model_type.value if model_type else None,
            )

        logger.debug(
            f"Loaded {entity.type} {entity.bbid}",
            extra={
                "bbid": str(entity.bbid),
                "entity_type": entity.type,
                "stage": "load_entity",
            },
        )
        context.entity = entity
        return context

    return load_entity
