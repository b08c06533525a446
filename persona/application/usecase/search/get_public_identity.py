"""Get public identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import parse_identity_id
from persona.application.usecase.search.common import PublicIdentityResponse
from persona.domain.service import PublicSearchService
from persona.domain.value import AccountId


class GetPublicIdentityRequest(BaseModel):
    """Get public identity request."""

    identity_id: str
    requester_id: UUID


class GetPublicIdentityUseCase:
    """Use case for reading one discoverable identity by id."""

    def __init__(self, public_search_service: PublicSearchService) -> None:
        self.public_search_service = public_search_service

    async def execute(self, request: GetPublicIdentityRequest) -> PublicIdentityResponse:
        """Execute get public identity flow.

        Raises:
            NotFoundError: If the identity is missing or not discoverable
        """
        identity = await self.public_search_service.get_public_identity(
            AccountId(request.requester_id), parse_identity_id(request.identity_id)
        )
        return PublicIdentityResponse.from_domain(identity)
