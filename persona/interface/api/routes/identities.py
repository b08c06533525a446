"""Identity routes.

Every route is scoped to the authenticated account; identities of other
accounts behave exactly like missing ones.
"""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from persona.application.usecase.identity import (
    CreateIdentityRequest,
    CreateIdentityUseCase,
    DeleteIdentityRequest,
    DeleteIdentityUseCase,
    GetIdentityRequest,
    GetIdentityUseCase,
    ListIdentitiesRequest,
    ListIdentitiesUseCase,
    SetPrimaryIdentityRequest,
    SetPrimaryIdentityUseCase,
    UpdateIdentityRequest,
    UpdateIdentityUseCase,
)
from persona.domain.model import IdentityDraft, IdentityPatch
from persona.domain.value import AccountId, IdentityContext
from persona.interface.api.auth import CurrentAccount
from persona.interface.api.responses import formatted_response

router = APIRouter(prefix="/identities", tags=["identities"], route_class=DishkaRoute)

RESOURCE_PATH = "/identities"


class CreateIdentityAPIRequest(IdentityDraft):
    """API request for creating an identity (camelCase body)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateIdentityAPIRequest(IdentityPatch):
    """API request for updating an identity; absent fields are left alone."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@router.get("")
async def list_identities(
    request: Request,
    owner_id: CurrentAccount,
    list_identities_use_case: FromDishka[ListIdentitiesUseCase],
    context: Optional[IdentityContext] = None,
) -> Response:
    """List the caller's identities.

    Without ``context`` the envelope also carries ``primary`` when one exists.

    Example:
        GET /identities?context=work
        Accept: text/csv
    """
    result = await list_identities_use_case.execute(
        ListIdentitiesRequest(owner_id=owner_id, context=context)
    )
    return formatted_response(request, result.wire(), resource_path=RESOURCE_PATH)


@router.get("/{identity_id}")
async def get_identity(
    identity_id: str,
    request: Request,
    owner_id: CurrentAccount,
    get_identity_use_case: FromDishka[GetIdentityUseCase],
) -> Response:
    """Get one of the caller's identities."""
    result = await get_identity_use_case.execute(
        GetIdentityRequest(identity_id=identity_id, owner_id=owner_id)
    )
    return formatted_response(request, result.wire(), resource_path=RESOURCE_PATH)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_identity(
    body: CreateIdentityAPIRequest,
    owner_id: CurrentAccount,
    create_identity_use_case: FromDishka[CreateIdentityUseCase],
) -> JSONResponse:
    """Create an identity owned by the caller.

    Any owner field in the body is ignored.

    Example:
        POST /identities
        {"personalName": "Alex Smith", "context": "work", "isPrimary": true}
    """
    result = await create_identity_use_case.execute(
        CreateIdentityRequest(owner_id=owner_id, draft=body)
    )
    logfire.info("Identity created via API", identity_id=result.id)
    return JSONResponse(result.wire(), status_code=status.HTTP_201_CREATED)


async def _update_identity(
    identity_id: str,
    body: UpdateIdentityAPIRequest,
    owner_id: AccountId,
    update_identity_use_case: UpdateIdentityUseCase,
) -> JSONResponse:
    result = await update_identity_use_case.execute(
        UpdateIdentityRequest(identity_id=identity_id, owner_id=owner_id, patch=body)
    )
    return JSONResponse(result.wire())


@router.put("/{identity_id}")
async def replace_identity(
    identity_id: str,
    body: UpdateIdentityAPIRequest,
    owner_id: CurrentAccount,
    update_identity_use_case: FromDishka[UpdateIdentityUseCase],
) -> JSONResponse:
    """Update an identity. PUT applies only the fields sent, like PATCH."""
    return await _update_identity(
        identity_id, body, owner_id, update_identity_use_case
    )


@router.patch("/{identity_id}")
async def update_identity(
    identity_id: str,
    body: UpdateIdentityAPIRequest,
    owner_id: CurrentAccount,
    update_identity_use_case: FromDishka[UpdateIdentityUseCase],
) -> JSONResponse:
    """Partially update one of the caller's identities.

    Example:
        PATCH /identities/{id}
        {"pronouns": null, "isPrimary": true}
    """
    return await _update_identity(
        identity_id, body, owner_id, update_identity_use_case
    )


@router.delete("/{identity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_identity(
    identity_id: str,
    owner_id: CurrentAccount,
    delete_identity_use_case: FromDishka[DeleteIdentityUseCase],
) -> Response:
    """Delete one of the caller's identities.

    The caller's last identity cannot be deleted (400).
    """
    await delete_identity_use_case.execute(
        DeleteIdentityRequest(identity_id=identity_id, owner_id=owner_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{identity_id}/set-primary")
async def set_primary_identity(
    identity_id: str,
    owner_id: CurrentAccount,
    set_primary_identity_use_case: FromDishka[SetPrimaryIdentityUseCase],
) -> JSONResponse:
    """Make one of the caller's identities the primary one."""
    result = await set_primary_identity_use_case.execute(
        SetPrimaryIdentityRequest(identity_id=identity_id, owner_id=owner_id)
    )
    return JSONResponse(result.wire())
