"""Mock persistence providers for testing."""

from dishka import Scope, provide

from persona.domain.repository import (
    AccountRepository,
    AuditLogRepository,
    IdentityRepository,
    UnitOfWork,
)
from persona.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryAuditLogRepository,
    InMemoryDatabase,
    InMemoryIdentityRepository,
    InMemoryUnitOfWork,
)
from persona.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database is APP-scoped so it outlives single requests of one
    container (e2e tests issue several); each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the container's in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, database: InMemoryDatabase) -> UnitOfWork:
        """Provide snapshot-and-restore unit of work."""
        return InMemoryUnitOfWork(database)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, database: InMemoryDatabase) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, database: InMemoryDatabase) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return InMemoryIdentityRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_audit_log_repository(
        self, database: InMemoryDatabase
    ) -> AuditLogRepository:
        """Provide in-memory audit log repository."""
        return InMemoryAuditLogRepository(database)
