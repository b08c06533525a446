"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from persona.domain.model.account import Account
from persona.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for Account aggregate."""

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass
