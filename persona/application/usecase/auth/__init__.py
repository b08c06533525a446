"""Authentication use cases."""

from .get_current_account import GetCurrentAccountRequest, GetCurrentAccountUseCase

__all__ = ["GetCurrentAccountRequest", "GetCurrentAccountUseCase"]
