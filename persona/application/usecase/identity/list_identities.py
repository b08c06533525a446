"""List identities use case."""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.base import WireModel
from persona.application.usecase.identity.common import IdentityResponse
from persona.domain.service import IdentityService
from persona.domain.value import AccountId, IdentityContext


class ListIdentitiesRequest(BaseModel):
    """List identities request."""

    owner_id: UUID  # From authenticated account
    context: Optional[IdentityContext] = None


class ListIdentitiesResponse(WireModel):
    """List identities response.

    ``primary`` is only reported for unfiltered listings.
    """

    identities: list[IdentityResponse]
    primary: Optional[IdentityResponse] = None

    def wire(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {}
        if self.primary is not None:
            envelope["primary"] = self.primary.wire()
        envelope["identities"] = [identity.wire() for identity in self.identities]
        return envelope


class ListIdentitiesUseCase:
    """Use case for listing the caller's identities."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize list identities use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: ListIdentitiesRequest) -> ListIdentitiesResponse:
        """Execute list identities flow.

        Steps:
        1. Load the owner's identities (optionally one context)
        2. Without a context filter, pick out the primary identity

        Args:
            request: Owner and optional context

        Returns:
            Identities, primary first then newest first
        """
        identities = await self.identity_service.list_identities(
            AccountId(request.owner_id), request.context
        )

        primary = None
        if request.context is None:
            primary = next((i for i in identities if i.is_primary), None)

        return ListIdentitiesResponse(
            identities=[IdentityResponse.from_domain(i) for i in identities],
            primary=IdentityResponse.from_domain(primary) if primary else None,
        )
