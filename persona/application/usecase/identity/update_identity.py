"""Update identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import (
    IdentityResponse,
    parse_identity_id,
)
from persona.domain.model import IdentityPatch
from persona.domain.service import IdentityService
from persona.domain.value import AccountId


class UpdateIdentityRequest(BaseModel):
    """Update identity request."""

    identity_id: str
    owner_id: UUID
    patch: IdentityPatch


class UpdateIdentityUseCase:
    """Use case for partially updating one of the caller's identities.

    Only fields present in the patch change; setting ``isPrimary`` to true
    moves the primary flag from whichever identity held it.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: UpdateIdentityRequest) -> IdentityResponse:
        """Execute update identity flow.

        Raises:
            NotFoundError: If the identity is missing or owned by someone else
        """
        identity = await self.identity_service.update_identity(
            parse_identity_id(request.identity_id),
            AccountId(request.owner_id),
            request.patch,
        )
        return IdentityResponse.from_domain(identity)
