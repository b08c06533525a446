"""Unit tests for settings validation."""

import pytest

from persona.config import AuthSettings, Settings
from persona.util.error import ConfigurationError


class TestSettings:
    """Settings validation."""

    def test_default_secret_is_refused_in_production(self):
        with pytest.raises(ConfigurationError):
            Settings(
                environment="production",
                host="api.persona.example",
                auth=AuthSettings(),
            )

    def test_production_with_secret(self):
        settings = Settings(
            environment="production",
            host="api.persona.example",
            frontend_host="persona.example",
            auth=AuthSettings(jwt_secret="s3cret"),
        )

        assert settings.api.base_url == "https://api.persona.example"
        assert settings.api.frontend_url == "https://persona.example"

    def test_search_defaults(self):
        settings = Settings()

        assert settings.search.default_limit == 20
        assert settings.search.max_limit == 50
