"""Author Routes — lookup and browse endpoints for Author entities.

Invariants:
    - Lookup endpoints: load Author by path BBID -> format -> 200
    - Browse endpoint: validate query -> load seed -> load relationships
      -> filter related Authors -> 200
    - 406 for a malformed BBID or ambiguous browse query, 404 for a missing entity
    - Handlers only list stages and pick a formatter

Design Decisions:
    - build_author_router() returns a new router per call: no module-level
      router singleton, registration happens in main.create_app
    - The `type` filter compares lower-cased author types on both sides
"""

import logging

from fastapi import APIRouter, Depends, Path, Query

from app.api.dependencies import get_request_context
from app.core.domain_types import EntityType
from app.core.format_entity_data import (
    get_author_basic_info, get_entity_aliases,
    get_entity_identifiers, get_entity_relationships,
)
from app.schemas.entity import (
    Aliases, AuthorDetail, BrowsedAuthors, Identifiers, RelatedAuthor,
    Relationships,
)
from app.services.browse import (
    get_browsed_relationships, load_entity_relationships_for_browse,
    validate_browse_request_query_parameters,
)
from app.services.entity_loader import (
    ALIASES_RELATIONS, IDENTIFIERS_RELATIONS, RELATIONSHIPS_RELATIONS,
    make_entity_loader,
)
from app.services.pipeline import RequestContext, run_pipeline

logger = logging.getLogger(__name__)

AUTHOR_BASIC_RELATIONS = [
    "default_alias.language",
    "author_type",
    "gender",
    "begin_area",
    "end_area",
]
AUTHOR_ERROR = "Author not found"
BROWSE_LINKED_MODELS = ["edition", "author", "edition-group", "work"]

LOOKUP_RESPONSES = {
    404: {"description": "Author not found"},
    406: {"description": "Invalid BBID"},
}
BROWSE_RESPONSES = {
    404: {"description": "Seed entity not found"},
    406: {"description": "Invalid BBID or invalid combination of query parameters"},
}


def build_author_router() -> APIRouter:
    """Build the /author route table."""
    router = APIRouter(prefix="/author", tags=["author"])

    basic_stages = [
        make_entity_loader(EntityType.AUTHOR, AUTHOR_BASIC_RELATIONS, AUTHOR_ERROR),
    ]
    alias_stages = [
        make_entity_loader(EntityType.AUTHOR, ALIASES_RELATIONS, AUTHOR_ERROR),
    ]
    identifier_stages = [
        make_entity_loader(EntityType.AUTHOR, IDENTIFIERS_RELATIONS, AUTHOR_ERROR),
    ]
    relationship_stages = [
        make_entity_loader(EntityType.AUTHOR, RELATIONSHIPS_RELATIONS, AUTHOR_ERROR),
    ]
    browse_stages = [
        validate_browse_request_query_parameters(BROWSE_LINKED_MODELS),
        make_entity_loader(
            None, RELATIONSHIPS_RELATIONS, "Entity not found", is_browse=True,
        ),
        load_entity_relationships_for_browse(),
    ]

    @router.get(
        "/{bbid}", response_model=AuthorDetail,
        summary="Lookup Author by BBID", responses=LOOKUP_RESPONSES,
    )
    async def get_author(
        bbid: str = Path(description="BBID of the Author"),
        context: RequestContext = Depends(get_request_context),
    ):
        """Basic details of an Author."""
        context = await run_pipeline(context, basic_stages)
        return get_author_basic_info(context.entity)

    @router.get(
        "/{bbid}/aliases", response_model=Aliases,
        summary="Get list of aliases of an Author by BBID",
        responses=LOOKUP_RESPONSES,
    )
    async def get_author_aliases(
        bbid: str = Path(description="BBID of the Author"),
        context: RequestContext = Depends(get_request_context),
    ):
        context = await run_pipeline(context, alias_stages)
        return get_entity_aliases(context.entity)

    @router.get(
        "/{bbid}/identifiers", response_model=Identifiers,
        summary="Get list of identifiers of an Author by BBID",
        responses=LOOKUP_RESPONSES,
    )
    async def get_author_identifiers(
        bbid: str = Path(description="BBID of the Author"),
        context: RequestContext = Depends(get_request_context),
    ):
        context = await run_pipeline(context, identifier_stages)
        return get_entity_identifiers(context.entity)

    @router.get(
        "/{bbid}/relationships", response_model=Relationships,
        summary="Get list of relationships of an Author by BBID",
        responses=LOOKUP_RESPONSES,
    )
    async def get_author_relationships(
        bbid: str = Path(description="BBID of the Author"),
        context: RequestContext = Depends(get_request_context),
    ):
        context = await run_pipeline(context, relationship_stages)
        return get_entity_relationships(context.entity)

    @router.get(
        "", response_model=BrowsedAuthors,
        summary="Get list of Authors related to an Edition, Edition Group, Work or Author",
        responses=BROWSE_RESPONSES,
    )
    async def browse_authors(
        author_type: str | None = Query(
            None, alias="type", description="Only Authors of this type, e.g. person",
        ),
        context: RequestContext = Depends(get_request_context),
    ):
        """Authors related to the entity named by exactly one of
        edition, author, edition-group or work."""
        context = await run_pipeline(context, browse_stages)

        def relationships_filter(info: AuthorDetail) -> bool:
            if author_type:
                return (info.type or "").lower() == author_type.lower()
            return True

        related = await get_browsed_relationships(
            context.session, context, EntityType.AUTHOR,
            get_author_basic_info, AUTHOR_BASIC_RELATIONS, relationships_filter,
        )
        return BrowsedAuthors(
            bbid=str(context.entity.bbid),
            related_authors=[RelatedAuthor(**item) for item in related],
        )

    return router
