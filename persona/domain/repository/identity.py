"""Identity repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from persona.domain.model.identity import Identity, PublicIdentity
from persona.domain.value import AccountId, IdentityContext, IdentityId


class IdentityRepository(ABC):
    """Repository for Identity entity.

    Every owner-scoped lookup takes the owner id; there is deliberately no
    method that returns a private identity by id alone.
    """

    @abstractmethod
    async def lock_owner(self, owner_id: AccountId) -> None:
        """Serialize concurrent writers for one owner until the transaction ends.

        Args:
            owner_id: Account whose identities are about to change
        """
        pass

    @abstractmethod
    async def find_owned(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Optional[Identity]:
        """Find an identity by ID if it belongs to the owner.

        Args:
            identity_id: The identity's unique identifier
            owner_id: The authenticated account

        Returns:
            The identity if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_owner(
        self, owner_id: AccountId, context: Optional[IdentityContext] = None
    ) -> list[Identity]:
        """List the owner's identities, primary first then newest first.

        Args:
            owner_id: The authenticated account
            context: Restrict to this context when given

        Returns:
            List of identities (may be empty)
        """
        pass

    @abstractmethod
    async def find_primary_by_owner(self, owner_id: AccountId) -> Optional[Identity]:
        """Get the owner's primary identity.

        Args:
            owner_id: The authenticated account

        Returns:
            The primary identity if one is set, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: AccountId) -> int:
        """Count the owner's identities."""
        pass

    @abstractmethod
    async def clear_primary(self, owner_id: AccountId, updated_at: datetime) -> None:
        """Unset ``is_primary`` on whichever of the owner's identities holds it.

        Args:
            owner_id: The authenticated account
            updated_at: Timestamp written to the identity that loses the flag
        """
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update).

        Args:
            identity: The identity to save

        Returns:
            The saved identity
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: IdentityId, owner_id: AccountId) -> bool:
        """Delete an owned identity.

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def search_discoverable(
        self,
        context: IdentityContext,
        text: Optional[str],
        limit: int,
    ) -> list[PublicIdentity]:
        """Search discoverable identities of every owner.

        Matches ``text`` case-insensitively against personal name, other
        names and title. Results are newest first.

        Args:
            context: Context to search in
            text: Substring filter, None for no filter
            limit: Maximum rows to return

        Returns:
            Public projections of matching identities
        """
        pass

    @abstractmethod
    async def find_discoverable(
        self, identity_id: IdentityId
    ) -> Optional[PublicIdentity]:
        """Public projection of one identity, None unless it is discoverable."""
        pass
