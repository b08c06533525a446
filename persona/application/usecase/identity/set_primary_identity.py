"""Set primary identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import (
    IdentityResponse,
    parse_identity_id,
)
from persona.domain.service import IdentityService
from persona.domain.value import AccountId


class SetPrimaryIdentityRequest(BaseModel):
    """Set primary identity request."""

    identity_id: str
    owner_id: UUID


class SetPrimaryIdentityUseCase:
    """Use case for moving the primary flag to one of the caller's identities."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: SetPrimaryIdentityRequest) -> IdentityResponse:
        """Execute set primary flow.

        Raises:
            NotFoundError: If the identity is missing or owned by someone else
        """
        identity = await self.identity_service.set_primary(
            parse_identity_id(request.identity_id), AccountId(request.owner_id)
        )
        return IdentityResponse.from_domain(identity)
