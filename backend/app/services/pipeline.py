"""Request Pipeline — typed per-request context and the stage runner.

Invariants:
    - A RequestContext belongs to exactly one request and is discarded with it
    - Stages run strictly in order; a stage signals failure by raising a
      BookBrainzError, which skips every remaining stage
    - run_pipeline never retries and never swallows exceptions

Design Decisions:
    - Stages are plain async callables (RequestContext) -> RequestContext built
      by factories (make_entity_loader, ...) so a route lists its chain explicitly
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityType

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Scratch state populated incrementally by request stages."""
    session: AsyncSession
    path_params: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, list[str]] = field(default_factory=dict)
    # Set by the browse query validator
    bbid: str | None = None
    model_type: EntityType | None = None
    # Set by the entity loader
    entity: object | None = None
    # Set by the browse relationship loader
    relationships: list = field(default_factory=list)


Stage = Callable[[RequestContext], Awaitable[RequestContext]]


async def run_pipeline(
    context: RequestContext, stages: Sequence[Stage],
) -> RequestContext:
    """Thread the context through each stage in order."""
    for stage in stages:
        context = await stage(context)
        logger.debug(
            f"Stage {getattr(stage, '__name__', stage)} completed",
            extra={"stage": getattr(stage, "__name__", None)},
        )
    return context
