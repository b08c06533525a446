"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository calls into one atomic transaction.

    Usage:
        async with unit_of_work.transaction():
            await identity_repository.clear_primary(owner_id, now)
            await identity_repository.save(identity)

    Leaving the block normally commits; leaving it with an exception rolls
    back every write made inside it and re-raises.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transactional scope."""
        pass
