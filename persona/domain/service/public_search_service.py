"""Public search domain service.

The only read path across accounts. Every result is a ``PublicIdentity``
projection of a discoverable identity, and every call is audited.
"""

from dataclasses import dataclass

import logfire

from persona.config import SearchSettings
from persona.domain.error import NotFoundError, ValidationError
from persona.domain.model.identity import PublicIdentity
from persona.domain.repository.identity import IdentityRepository
from persona.domain.service.audit_service import AuditService
from persona.domain.value import AccountId, AuditOperation, IdentityId, SearchQuery

from .base import Service


@dataclass
class SearchResult:
    """One page of public search results."""

    identities: list[PublicIdentity]
    has_more: bool


class PublicSearchService(Service):
    """Domain service for discoverable identity lookups."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        audit_service: AuditService,
        search_settings: SearchSettings,
    ) -> None:
        """Initialize public search service.

        Args:
            identity_repository: Identity repository
            audit_service: Audit recorder
            search_settings: Default and maximum page size
        """
        self.identity_repository = identity_repository
        self.audit_service = audit_service
        self.search_settings = search_settings

    def resolve_limit(self, limit: int | None) -> int:
        """Apply the default page size and reject out-of-range limits.

        Raises:
            ValidationError: If limit is outside 1..max_limit
        """
        if limit is None:
            return self.search_settings.default_limit
        if limit < 1 or limit > self.search_settings.max_limit:
            raise ValidationError(
                field_errors={
                    "limit": [
                        f"Limit must be between 1 and {self.search_settings.max_limit}"
                    ]
                }
            )
        return limit

    async def search(self, requester_id: AccountId, query: SearchQuery) -> SearchResult:
        """Search discoverable identities in one context.

        Args:
            requester_id: Authenticated account performing the search
            query: Context, optional text filter and page size

        Returns:
            Matching public identities and whether more exist

        Raises:
            ValidationError: If the limit is out of range
        """
        limit = self.resolve_limit(query.limit)

        with logfire.span(
            "public_search_service.search",
            requester_id=str(requester_id),
            context=query.context.value,
            has_text=query.q is not None,
            limit=limit,
        ):
            # One extra row tells us whether another page exists
            rows = await self.identity_repository.search_discoverable(
                query.context, query.q, limit + 1
            )
            identities = rows[:limit]
            has_more = len(rows) > limit

            await self.audit_service.record(
                requester_id,
                AuditOperation.CROSS_USER_ACCESS,
                {
                    "kind": "search",
                    "context": query.context.value,
                    "query": query.q,
                    "limit": limit,
                    "accessedCount": len(identities),
                },
            )

            logfire.info(
                "Public search completed",
                requester_id=str(requester_id),
                context=query.context.value,
                count=len(identities),
                has_more=has_more,
            )
            return SearchResult(identities=identities, has_more=has_more)

    async def get_public_identity(
        self, requester_id: AccountId, identity_id: IdentityId
    ) -> PublicIdentity:
        """Get the public projection of one discoverable identity.

        Raises:
            NotFoundError: If the identity does not exist or is not discoverable
        """
        with logfire.span(
            "public_search_service.get_public_identity",
            requester_id=str(requester_id),
            identity_id=str(identity_id),
        ):
            identity = await self.identity_repository.find_discoverable(identity_id)
            if not identity:
                logfire.warn(
                    "Public identity not found", identity_id=str(identity_id)
                )
                raise NotFoundError("Identity", str(identity_id))

            await self.audit_service.record(
                requester_id,
                AuditOperation.CROSS_USER_ACCESS,
                {
                    "kind": "lookup",
                    "context": identity.context.value,
                    "accessedCount": 1,
                },
                entity_id=str(identity.id),
            )
            return identity
