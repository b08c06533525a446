"""Identity use cases."""

from .common import IdentityResponse
from .create_identity import CreateIdentityRequest, CreateIdentityUseCase
from .delete_identity import DeleteIdentityRequest, DeleteIdentityUseCase
from .get_identity import GetIdentityRequest, GetIdentityUseCase
from .list_identities import (
    ListIdentitiesRequest,
    ListIdentitiesResponse,
    ListIdentitiesUseCase,
)
from .set_primary_identity import SetPrimaryIdentityRequest, SetPrimaryIdentityUseCase
from .update_identity import UpdateIdentityRequest, UpdateIdentityUseCase

__all__ = [
    "CreateIdentityRequest",
    "CreateIdentityUseCase",
    "DeleteIdentityRequest",
    "DeleteIdentityUseCase",
    "GetIdentityRequest",
    "GetIdentityUseCase",
    "IdentityResponse",
    "ListIdentitiesRequest",
    "ListIdentitiesResponse",
    "ListIdentitiesUseCase",
    "SetPrimaryIdentityRequest",
    "SetPrimaryIdentityUseCase",
    "UpdateIdentityRequest",
    "UpdateIdentityUseCase",
]
