"""Shared identity response model and helpers."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from persona.application.usecase.base import WireModel
from persona.domain.error import NotFoundError
from persona.domain.model import Identity
from persona.domain.value import IdentityContext, IdentityId


class IdentityResponse(WireModel):
    """Identity as returned to its owner."""

    id: str
    owner_id: str
    personal_name: str
    context: IdentityContext
    other_names: list[str]
    pronouns: Optional[str]
    title: Optional[str]
    avatar_url: Optional[str]
    social_links: dict[str, str]
    is_primary: bool
    is_discoverable: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, identity: Identity) -> "IdentityResponse":
        return cls(
            id=str(identity.id),
            owner_id=str(identity.owner_id),
            personal_name=identity.personal_name,
            context=identity.context,
            other_names=identity.other_names,
            pronouns=identity.pronouns,
            title=identity.title,
            avatar_url=identity.avatar_url,
            social_links=identity.social_links,
            is_primary=identity.is_primary,
            is_discoverable=identity.is_discoverable,
            created_at=identity.created_at,
            updated_at=identity.updated_at,
        )


def parse_identity_id(value: str) -> IdentityId:
    """Parse a path identifier.

    Malformed ids are reported exactly like unknown ones.

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return IdentityId(UUID(value))
    except ValueError:
        raise NotFoundError("Identity", value)
