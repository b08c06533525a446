"""Unit of work implementation using a PostgreSQL savepoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.repository.unit_of_work import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Runs each transaction as a SAVEPOINT in the request session.

    The request-scoped session commits once at the end of the request; the
    savepoint makes every domain operation all-or-nothing on its own.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
