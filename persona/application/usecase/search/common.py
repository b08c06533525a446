"""Public identity response model."""

from typing import Optional

from persona.application.usecase.base import WireModel
from persona.domain.model import PublicIdentity
from persona.domain.value import IdentityContext


class PublicIdentityResponse(WireModel):
    """Identity as visible to other accounts."""

    id: str
    personal_name: str
    context: IdentityContext
    other_names: list[str]
    pronouns: Optional[str]
    title: Optional[str]
    avatar_url: Optional[str]
    social_links: dict[str, str]

    @classmethod
    def from_domain(cls, identity: PublicIdentity) -> "PublicIdentityResponse":
        return cls(
            id=str(identity.id),
            personal_name=identity.personal_name,
            context=identity.context,
            other_names=identity.other_names,
            pronouns=identity.pronouns,
            title=identity.title,
            avatar_url=identity.avatar_url,
            social_links=identity.social_links,
        )
