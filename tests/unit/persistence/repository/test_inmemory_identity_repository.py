"""Unit tests for the in-memory identity repository and unit of work."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from persona.domain.model import Identity
from persona.domain.value import IdentityContext, IdentityId
from persona.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryIdentityRepository,
    InMemoryUnitOfWork,
)
from tests.conftest import make_account_id

SAME_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _identity(owner_id, name, **overrides) -> Identity:
    return Identity(
        id=IdentityId(uuid4()),
        owner_id=owner_id,
        personal_name=name,
        context=IdentityContext.WORK,
        created_at=SAME_TIME,
        updated_at=SAME_TIME,
        **overrides,
    )


class TestInMemoryIdentityRepository:
    """Ordering and projection."""

    @pytest.mark.asyncio
    async def test_created_at_ties_favour_latest_insert(self):
        # Arrange
        repo = InMemoryIdentityRepository()
        owner_id = make_account_id()
        first = await repo.save(_identity(owner_id, "First"))
        second = await repo.save(_identity(owner_id, "Second"))

        # Act
        identities = await repo.find_all_by_owner(owner_id)

        # Assert
        assert [i.id for i in identities] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_search_projection_drops_private_fields(self):
        # Arrange
        repo = InMemoryIdentityRepository()
        await repo.save(_identity(make_account_id(), "Visible", is_discoverable=True))

        # Act
        results = await repo.search_discoverable(IdentityContext.WORK, None, 10)

        # Assert
        assert "owner_id" not in results[0].model_dump()


class TestInMemoryUnitOfWork:
    """Snapshot and restore."""

    @pytest.mark.asyncio
    async def test_exception_restores_previous_state(self):
        # Arrange
        database = InMemoryDatabase()
        repo = InMemoryIdentityRepository(database)
        unit_of_work = InMemoryUnitOfWork(database)
        owner_id = make_account_id()
        kept = await repo.save(_identity(owner_id, "Kept", is_primary=True))

        # Act
        with pytest.raises(RuntimeError):
            async with unit_of_work.transaction():
                await repo.clear_primary(owner_id, SAME_TIME)
                await repo.save(_identity(owner_id, "Lost", is_primary=True))
                raise RuntimeError("boom")

        # Assert
        identities = await repo.find_all_by_owner(owner_id)
        assert [i.id for i in identities] == [kept.id]
        assert identities[0].is_primary is True
