"""Get identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import (
    IdentityResponse,
    parse_identity_id,
)
from persona.domain.service import IdentityService
from persona.domain.value import AccountId


class GetIdentityRequest(BaseModel):
    """Get identity request."""

    identity_id: str
    owner_id: UUID


class GetIdentityUseCase:
    """Use case for reading one of the caller's identities."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: GetIdentityRequest) -> IdentityResponse:
        """Execute get identity flow.

        Raises:
            NotFoundError: If the identity is missing or owned by someone else
        """
        identity = await self.identity_service.get_identity(
            parse_identity_id(request.identity_id), AccountId(request.owner_id)
        )
        return IdentityResponse.from_domain(identity)
