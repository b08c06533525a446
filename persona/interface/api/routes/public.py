"""Public identity routes.

The only endpoints that read other accounts' identities. Results are
whitelisted projections of discoverable identities and every call is
audited.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response

from persona.application.usecase.search import (
    GetPublicIdentityRequest,
    GetPublicIdentityUseCase,
    SearchIdentitiesRequest,
    SearchIdentitiesUseCase,
)
from persona.domain.value import IdentityContext
from persona.interface.api.auth import CurrentAccount
from persona.interface.api.responses import formatted_response

router = APIRouter(
    prefix="/public/identities", tags=["public"], route_class=DishkaRoute
)

RESOURCE_PATH = "/public/identities"


@router.get("/search")
async def search_identities(
    request: Request,
    requester_id: CurrentAccount,
    search_identities_use_case: FromDishka[SearchIdentitiesUseCase],
    context: IdentityContext,
    q: Optional[str] = None,
    limit: Optional[int] = None,
) -> Response:
    """Search discoverable identities in one context.

    Example:
        GET /public/identities/search?context=work&q=smith&limit=10

        Response:
        {"identities": [...], "hasMore": false}
    """
    result = await search_identities_use_case.execute(
        SearchIdentitiesRequest(
            requester_id=requester_id, context=context, q=q, limit=limit
        )
    )
    return formatted_response(request, result.wire(), resource_path=RESOURCE_PATH)


@router.get("/{identity_id}")
async def get_public_identity(
    identity_id: str,
    request: Request,
    requester_id: CurrentAccount,
    get_public_identity_use_case: FromDishka[GetPublicIdentityUseCase],
) -> Response:
    """Get one discoverable identity by id."""
    result = await get_public_identity_use_case.execute(
        GetPublicIdentityRequest(identity_id=identity_id, requester_id=requester_id)
    )
    return formatted_response(request, result.wire(), resource_path=RESOURCE_PATH)
