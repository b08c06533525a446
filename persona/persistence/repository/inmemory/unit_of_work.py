"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from persona.domain.repository.unit_of_work import UnitOfWork

from .database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshot-and-restore transactions over an InMemoryDatabase."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except BaseException:
            self.database.restore(snapshot)
            raise
