"""In-memory account repository for testing."""

from typing import Optional

from persona.domain.model.account import Account
from persona.domain.repository.account import AccountRepository
from persona.domain.value import AccountId

from .database import InMemoryDatabase


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find account by ID."""
        return self.database.accounts.get(account_id)

    async def save(self, account: Account) -> Account:
        """Save account."""
        self.database.accounts[account.id] = account
        return account
