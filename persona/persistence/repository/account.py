"""Account repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model.account import Account
from persona.domain.repository.account import AccountRepository
from persona.domain.value import AccountId
from persona.persistence.mappers import account_to_dict, row_to_account
from persona.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Get account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_account(dict(row))

    async def save(self, account: Account) -> Account:
        """Insert or update an account.

        Two first requests of a new account can race; the upsert makes the
        second one a plain update.
        """
        values = account_to_dict(account)
        stmt = insert(accounts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[accounts_table.c.id],
            set_={"email": stmt.excluded.email, "updated_at": stmt.excluded.updated_at},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return account
