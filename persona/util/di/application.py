"""Application layer DI providers."""

from dishka import Scope, provide

from persona.application.usecase.auth import GetCurrentAccountUseCase
from persona.application.usecase.identity import (
    CreateIdentityUseCase,
    DeleteIdentityUseCase,
    GetIdentityUseCase,
    ListIdentitiesUseCase,
    SetPrimaryIdentityUseCase,
    UpdateIdentityUseCase,
)
from persona.application.usecase.search import (
    GetPublicIdentityUseCase,
    SearchIdentitiesUseCase,
)
from persona.domain.service import (
    AccountService,
    IdentityService,
    JWTService,
    PublicSearchService,
)
from persona.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_account_use_case(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(
            jwt_service=jwt_service, account_service=account_service
        )

    # Identity use cases
    @provide
    def get_list_identities_use_case(
        self, identity_service: IdentityService
    ) -> ListIdentitiesUseCase:
        return ListIdentitiesUseCase(identity_service=identity_service)

    @provide
    def get_get_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetIdentityUseCase:
        return GetIdentityUseCase(identity_service=identity_service)

    @provide
    def get_create_identity_use_case(
        self, identity_service: IdentityService
    ) -> CreateIdentityUseCase:
        return CreateIdentityUseCase(identity_service=identity_service)

    @provide
    def get_update_identity_use_case(
        self, identity_service: IdentityService
    ) -> UpdateIdentityUseCase:
        return UpdateIdentityUseCase(identity_service=identity_service)

    @provide
    def get_delete_identity_use_case(
        self, identity_service: IdentityService
    ) -> DeleteIdentityUseCase:
        return DeleteIdentityUseCase(identity_service=identity_service)

    @provide
    def get_set_primary_identity_use_case(
        self, identity_service: IdentityService
    ) -> SetPrimaryIdentityUseCase:
        return SetPrimaryIdentityUseCase(identity_service=identity_service)

    # Public search use cases
    @provide
    def get_search_identities_use_case(
        self, public_search_service: PublicSearchService
    ) -> SearchIdentitiesUseCase:
        return SearchIdentitiesUseCase(public_search_service=public_search_service)

    @provide
    def get_get_public_identity_use_case(
        self, public_search_service: PublicSearchService
    ) -> GetPublicIdentityUseCase:
        return GetPublicIdentityUseCase(public_search_service=public_search_service)
