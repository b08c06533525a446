"""Delete identity use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.identity.common import parse_identity_id
from persona.domain.service import IdentityService
from persona.domain.value import AccountId


class DeleteIdentityRequest(BaseModel):
    """Delete identity request."""

    identity_id: str
    owner_id: UUID


class DeleteIdentityUseCase:
    """Use case for deleting one of the caller's identities."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: DeleteIdentityRequest) -> bool:
        """Execute delete identity flow.

        Returns:
            True once the identity is gone

        Raises:
            NotFoundError: If the identity is missing or owned by someone else
            LastIdentityError: If it is the caller's only identity
        """
        return await self.identity_service.delete_identity(
            parse_identity_id(request.identity_id), AccountId(request.owner_id)
        )
