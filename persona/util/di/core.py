"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from persona.config import AuthSettings, SearchSettings, Settings
from persona.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider.

    Settings are loaded once per container from the environment and ``.env``.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        return settings.search
