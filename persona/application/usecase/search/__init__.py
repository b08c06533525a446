"""Public search use cases."""

from .common import PublicIdentityResponse
from .get_public_identity import GetPublicIdentityRequest, GetPublicIdentityUseCase
from .search_identities import (
    SearchIdentitiesRequest,
    SearchIdentitiesResponse,
    SearchIdentitiesUseCase,
)

__all__ = [
    "GetPublicIdentityRequest",
    "GetPublicIdentityUseCase",
    "PublicIdentityResponse",
    "SearchIdentitiesRequest",
    "SearchIdentitiesResponse",
    "SearchIdentitiesUseCase",
]
