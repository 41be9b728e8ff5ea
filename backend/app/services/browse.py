"""Browse Stages — resolve a seed entity from the query string and collect related entities.

Invariants:
    - Exactly one recognised linked-entity parameter per browse request;
      zero or several raise InvalidBrowseRequestError (406)
    - A malformed parameter value raises InvalidBBIDError (406)
    - Relationships are loaded in both directions, ordered by id
    - get_browsed_relationships groups by related entity, first-seen order,
      and returns [] rather than raising when nothing matches

Design Decisions:
    - The related entity is re-fetched with the caller's relation list so the
      caller's info formatter can stay pure
    - Filtering runs on the formatted info, the same shape the client sees
"""

import logging
import uuid
from typing import Callable, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import EntityType, is_valid_bbid, model_type_for_parameter
from app.core.errors import InvalidBBIDError, InvalidBrowseRequestError
from app.models.relationship import Relationship
from app.schemas.entity import BrowsedRelationship
from app.services.entity_loader import fetch_entity
from app.services.pipeline import RequestContext, Stage

logger = logging.getLogger(__name__)


def validate_browse_request_query_parameters(
    valid_linked_models: Sequence[str],
) -> Stage:
    """Build a stage that records the single linked entity named in the query."""
    allowed = list(valid_linked_models)

    async def validate_browse_query(context: RequestContext) -> RequestContext:
        found = [name for name in allowed if name in context.query_params]
        if len(found) != 1:
            logger.info(
                f"Rejected browse query with linked parameters {found}",
                extra={"stage": "validate_browse_query"},
            )
            raise InvalidBrowseRequestError(found, allowed)

        linked_model = found[0]
        values = context.query_params[linked_model]
        bbid = values[0] if len(values) == 1 else None
        if not is_valid_bbid(bbid):
            logger.info(
                f"Rejected browse {linked_model} BBID {values!r}",
                extra={"stage": "validate_browse_query"},
            )
            raise InvalidBBIDError(bbid)

        context.model_type = model_type_for_parameter(linked_model)
        context.bbid = bbid
        return context

    return validate_browse_query


def load_entity_relationships_for_browse() -> Stage:
    """Build a stage that loads every relationship touching context.entity."""

    async def load_relationships(context: RequestContext) -> RequestContext:
        seed_bbid = context.entity.bbid
        result = await context.session.execute(
            select(Relationship)
            .where(or_(
                Relationship.source_bbid == seed_bbid,
                Relationship.target_bbid == seed_bbid,
            ))
            .options(
                selectinload(Relationship.type),
                selectinload(Relationship.source),
                selectinload(Relationship.target),
            )
            .order_by(Relationship.id)
            .execution_options(populate_existing=True)
        )
        context.relationships = list(result.scalars().all())
        logger.debug(
            f"Loaded {len(context.relationships)} relationships for browse",
            extra={"bbid": str(seed_bbid), "stage": "load_relationships"},
        )
        return context

    return load_relationships


async def get_browsed_relationships(
    db: AsyncSession,
    context: RequestContext,
    browsed_entity_type: EntityType,
    get_entity_info: Callable,
    fetch_related: Sequence[str],
    filter_relationship: Callable[[object], bool],
) -> list[dict]:
    """Collect entities of browsed_entity_type linked to the seed entity.

    Returns ``[{"entity": info, "relationships": [BrowsedRelationship, ...]}]``
    with one item per related entity, in order of first appearance.
    """
    seed_bbid = context.entity.bbid
    grouped: dict[uuid.UUID, dict | None] = {}

    for rel in context.relationships:
        related = rel.target if rel.source_bbid == seed_bbid else rel.source
        if related.type != browsed_entity_type.value:
            continue

        if related.bbid not in grouped:
            loaded = await fetch_entity(
                db, browsed_entity_type, str(related.bbid), fetch_related,
            )
            info = get_entity_info(loaded)
            if not filter_relationship(info):
                grouped[related.bbid] = None
                continue
            grouped[related.bbid] = {"entity": info, "relationships": []}
        elif grouped[related.bbid] is None:
            continue

        grouped[related.bbid]["relationships"].append(BrowsedRelationship(
            relationship_type_id=rel.type.id,
            relationship_type=rel.type.label,
        ))

    return [item for item in grouped.values() if item is not None]
