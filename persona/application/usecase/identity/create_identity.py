"""Create identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import IdentityResponse
from persona.domain.model import IdentityDraft
from persona.domain.service import IdentityService
from persona.domain.value import AccountId


class CreateIdentityRequest(BaseModel):
    """Create identity request."""

    owner_id: UUID  # From authenticated account, never from the body
    draft: IdentityDraft


class CreateIdentityUseCase:
    """Use case for creating an identity owned by the caller."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize create identity use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: CreateIdentityRequest) -> IdentityResponse:
        """Execute create identity flow.

        Args:
            request: Owner and validated draft

        Returns:
            The created identity
        """
        identity = await self.identity_service.create_identity(
            AccountId(request.owner_id), request.draft
        )
        return IdentityResponse.from_domain(identity)
