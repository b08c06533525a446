"""Get current account use case."""

from uuid import UUID

from pydantic import BaseModel

from persona.domain.service import AccountService, JWTService
from persona.domain.value import AccountId
from persona.util.error import TokenError


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    token: str  # JWT token


class GetCurrentAccountUseCase:
    """Use case for resolving the authenticated account."""

    def __init__(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> None:
        """Initialize get current account use case.

        Args:
            jwt_service: JWT token domain service
            account_service: Account domain service
        """
        self.jwt_service = jwt_service
        self.account_service = account_service

    @property
    def cookie_name(self) -> str:
        """Name of the cookie the token may arrive in."""
        return self.jwt_service.auth_settings.cookie_name

    async def execute(self, request: GetCurrentAccountRequest) -> AccountId:
        """Execute get current account flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract account_id from token
        3. Provision the account on first sight

        Args:
            request: Request with JWT token

        Returns:
            Authenticated account ID

        Raises:
            TokenError: If token is invalid, expired or names a malformed account
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            account_id = AccountId(UUID(payload.account_id))
        except ValueError:
            raise TokenError("Token account_id is not a valid UUID")

        account = await self.account_service.ensure_account(account_id)
        return account.id
