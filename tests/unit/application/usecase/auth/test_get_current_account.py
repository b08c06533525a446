"""Unit tests for GetCurrentAccountUseCase."""

import pytest

from persona.application.usecase.auth import (
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
)
from persona.domain.repository import AccountRepository
from persona.domain.service import JWTService
from persona.util.error import TokenError
from tests.conftest import make_account_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentAccountUseCase:
    """Token to account resolution."""

    @pytest.mark.asyncio
    async def test_valid_token_provisions_account(self, unit_env):
        """A verified token yields its account, created on first sight."""
        # Arrange
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        jwt_service = await unit_env.get(JWTService)
        account_repo = await unit_env.get(AccountRepository)
        account_id = make_account_id()
        token = jwt_service.create_token(str(account_id))

        # Act
        result = await use_case.execute(GetCurrentAccountRequest(token=token))

        # Assert
        assert result == account_id
        assert await account_repo.find_by_id(account_id) is not None

    @pytest.mark.asyncio
    async def test_non_uuid_account_claim_is_rejected(self, unit_env):
        """Tokens must name a UUID account."""
        # Arrange
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token("not-a-uuid")

        # Act & Assert
        with pytest.raises(TokenError):
            await use_case.execute(GetCurrentAccountRequest(token=token))

    @pytest.mark.asyncio
    async def test_invalid_token_is_rejected(self, unit_env):
        """Unverifiable tokens raise TokenError."""
        # Arrange
        use_case = await unit_env.get(GetCurrentAccountUseCase)

        # Act & Assert
        with pytest.raises(TokenError):
            await use_case.execute(GetCurrentAccountRequest(token="garbage"))
