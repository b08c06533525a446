"""In-memory identity repository for testing."""

from datetime import datetime
from typing import Optional

from persona.domain.model.identity import Identity, PublicIdentity
from persona.domain.repository.identity import IdentityRepository
from persona.domain.value import AccountId, IdentityContext, IdentityId

from .database import InMemoryDatabase


def _newest_first(identities: list[Identity]) -> list[Identity]:
    # Reversed insertion order breaks created_at ties in favour of later rows
    return sorted(reversed(identities), key=lambda i: i.created_at, reverse=True)


def _to_public(identity: Identity) -> PublicIdentity:
    return PublicIdentity(
        id=identity.id,
        personal_name=identity.personal_name,
        context=identity.context,
        other_names=list(identity.other_names),
        pronouns=identity.pronouns,
        title=identity.title,
        avatar_url=identity.avatar_url,
        social_links=dict(identity.social_links),
    )


def _matches(identity: Identity, text: str) -> bool:
    needle = text.lower()
    candidates = [identity.personal_name, identity.title or "", *identity.other_names]
    return any(needle in candidate.lower() for candidate in candidates)


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def lock_owner(self, owner_id: AccountId) -> None:
        """No-op: nothing awaits between the steps of an in-memory write."""
        return None

    async def find_owned(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Optional[Identity]:
        """Find identity by ID if owned by the account."""
        for identity in self.database.identities:
            if identity.id == identity_id and identity.owner_id == owner_id:
                return identity
        return None

    async def find_all_by_owner(
        self, owner_id: AccountId, context: Optional[IdentityContext] = None
    ) -> list[Identity]:
        """Find the owner's identities, primary first then newest first."""
        matches = [
            i
            for i in self.database.identities
            if i.owner_id == owner_id and (context is None or i.context == context)
        ]
        # Stable sort keeps newest-first order within each group
        return sorted(_newest_first(matches), key=lambda i: not i.is_primary)

    async def find_primary_by_owner(self, owner_id: AccountId) -> Optional[Identity]:
        """Get primary identity for an account."""
        for identity in self.database.identities:
            if identity.owner_id == owner_id and identity.is_primary:
                return identity
        return None

    async def count_by_owner(self, owner_id: AccountId) -> int:
        """Count the owner's identities."""
        return sum(1 for i in self.database.identities if i.owner_id == owner_id)

    async def clear_primary(self, owner_id: AccountId, updated_at: datetime) -> None:
        """Unset the owner's primary flag."""
        self.database.identities = [
            i.model_copy(update={"is_primary": False, "updated_at": updated_at})
            if i.owner_id == owner_id and i.is_primary
            else i
            for i in self.database.identities
        ]

    async def save(self, identity: Identity) -> Identity:
        """Save identity."""
        for index, existing in enumerate(self.database.identities):
            if existing.id == identity.id:
                self.database.identities[index] = identity
                return identity

        self.database.identities.append(identity)
        return identity

    async def delete(self, identity_id: IdentityId, owner_id: AccountId) -> bool:
        """Delete an owned identity."""
        before = len(self.database.identities)
        self.database.identities = [
            i
            for i in self.database.identities
            if not (i.id == identity_id and i.owner_id == owner_id)
        ]
        return len(self.database.identities) < before

    async def search_discoverable(
        self,
        context: IdentityContext,
        text: Optional[str],
        limit: int,
    ) -> list[PublicIdentity]:
        """Search discoverable identities of every owner, newest first."""
        matches = [
            i
            for i in self.database.identities
            if i.is_discoverable
            and i.context == context
            and (not text or _matches(i, text))
        ]
        return [_to_public(i) for i in _newest_first(matches)[:limit]]

    async def find_discoverable(
        self, identity_id: IdentityId
    ) -> Optional[PublicIdentity]:
        """Public projection of a discoverable identity."""
        for identity in self.database.identities:
            if identity.id == identity_id and identity.is_discoverable:
                return _to_public(identity)
        return None
