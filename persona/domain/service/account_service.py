"""Account domain service."""

import logfire

from persona.domain.model.account import Account
from persona.domain.repository.account import AccountRepository
from persona.domain.value import AccountId

from .base import Service


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def ensure_account(self, account_id: AccountId) -> Account:
        """Return the account, creating its row on first sight.

        The authentication service is trusted: a verified token for an
        unknown account id provisions that account.

        Args:
            account_id: Authenticated account ID

        Returns:
            Existing or newly created account
        """
        with logfire.span("account_service.ensure_account", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if account:
                return account

            account = await self.account_repository.save(Account(id=account_id))
            logfire.info("Account provisioned", account_id=str(account_id))
            return account
