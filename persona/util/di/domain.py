"""Domain layer DI providers."""

from dishka import Scope, provide

from persona.config import AuthSettings, SearchSettings
from persona.domain.repository import (
    AccountRepository,
    AuditLogRepository,
    IdentityRepository,
    UnitOfWork,
)
from persona.domain.service import (
    AccountService,
    AuditService,
    IdentityService,
    JWTService,
    PublicSearchService,
)
from persona.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories and
    unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_audit_service(
        self, audit_log_repository: AuditLogRepository
    ) -> AuditService:
        """Provide audit domain service."""
        return AuditService(audit_log_repository=audit_log_repository)

    @provide
    def get_identity_service(
        self,
        identity_repository: IdentityRepository,
        unit_of_work: UnitOfWork,
        audit_service: AuditService,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_repository=identity_repository,
            unit_of_work=unit_of_work,
            audit_service=audit_service,
        )

    @provide
    def get_public_search_service(
        self,
        identity_repository: IdentityRepository,
        audit_service: AuditService,
        search_settings: SearchSettings,
    ) -> PublicSearchService:
        """Provide public search domain service."""
        return PublicSearchService(
            identity_repository=identity_repository,
            audit_service=audit_service,
            search_settings=search_settings,
        )
