"""Search identities use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.base import WireModel
from persona.application.usecase.search.common import PublicIdentityResponse
from persona.domain.service import PublicSearchService
from persona.domain.value import AccountId, IdentityContext, SearchQuery


class SearchIdentitiesRequest(BaseModel):
    """Search identities request."""

    requester_id: UUID  # From authenticated account
    context: IdentityContext
    q: Optional[str] = None
    limit: Optional[int] = None


class SearchIdentitiesResponse(WireModel):
    """Search identities response."""

    identities: list[PublicIdentityResponse]
    has_more: bool


class SearchIdentitiesUseCase:
    """Use case for searching discoverable identities of other accounts."""

    def __init__(self, public_search_service: PublicSearchService) -> None:
        """Initialize search identities use case.

        Args:
            public_search_service: Public search domain service
        """
        self.public_search_service = public_search_service

    async def execute(self, request: SearchIdentitiesRequest) -> SearchIdentitiesResponse:
        """Execute search flow.

        Args:
            request: Context, optional text filter and page size

        Returns:
            Newest-first page of public identities

        Raises:
            ValidationError: If the limit is out of range
        """
        result = await self.public_search_service.search(
            AccountId(request.requester_id),
            SearchQuery(context=request.context, q=request.q, limit=request.limit),
        )
        return SearchIdentitiesResponse(
            identities=[
                PublicIdentityResponse.from_domain(identity)
                for identity in result.identities
            ],
            has_more=result.has_more,
        )
