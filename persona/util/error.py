"""Errors raised by the utility layer (settings, DI wiring, tokens)."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are unusable for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass


class TokenError(UtilError):
    """Authentication token is missing, malformed, expired or forged."""

    pass
