"""Request Dependencies — builds the per-request RequestContext.

Invariants:
    - One RequestContext per request, bound to that request's AsyncSession
    - Query parameters keep every value (a repeated parameter is not collapsed)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.services.pipeline import RequestContext


async def get_request_context(
    request: Request, db: AsyncSession = Depends(get_db),
) -> RequestContext:
    """FastAPI dependency producing a fresh RequestContext."""
    query_params: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        query_params.setdefault(key, []).append(value)
    return RequestContext(
        session=db,
        path_params=dict(request.path_params),
        query_params=query_params,
    )
