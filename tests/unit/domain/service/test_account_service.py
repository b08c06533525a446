"""Unit tests for AccountService."""

import pytest

from persona.domain.model.account import Account
from persona.domain.repository import AccountRepository
from persona.domain.service import AccountService
from persona.persistence.repository.inmemory import InMemoryAccountRepository
from tests.conftest import make_account_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestEnsureAccount:
    """Tests for ensure_account method."""

    @pytest.mark.asyncio
    async def test_unknown_account_is_provisioned(self, unit_env):
        """First sight of an account id stores it."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        account_id = make_account_id()

        # Act
        account = await account_service.ensure_account(account_id)

        # Assert
        assert account.id == account_id
        assert await account_repo.find_by_id(account_id) == account

    @pytest.mark.asyncio
    async def test_known_account_is_returned_unchanged(self, unit_env):
        """Repeated calls return the stored account."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        account_id = make_account_id()
        first = await account_service.ensure_account(account_id)

        # Act
        second = await account_service.ensure_account(account_id)

        # Assert
        assert second == first


class CountingAccountRepository(InMemoryAccountRepository):
    """In-memory account store that counts writes."""

    def __init__(self) -> None:
        super().__init__()
        self.saves = 0

    async def save(self, account: Account) -> Account:
        self.saves += 1
        return await super().save(account)


class TestEnsureAccountWrites:
    """Known accounts are read, never rewritten."""

    @pytest.mark.asyncio
    async def test_known_account_is_not_saved_again(self):
        # Arrange
        account_repo = CountingAccountRepository()
        account_service = AccountService(account_repo)
        account_id = make_account_id()
        await account_service.ensure_account(account_id)

        # Act
        for _ in range(3):
            await account_service.ensure_account(account_id)

        # Assert
        assert account_repo.saves == 1
