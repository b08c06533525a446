"""Identity entity.

An identity is one context-scoped profile of an account. An account owns
several identities and at most one of them is primary.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from persona.domain.model.common import DomainModel
from persona.domain.value import AccountId, IdentityContext, IdentityId, validate_url


def utcnow() -> datetime:
    """Timezone-aware current time used for store-assigned timestamps."""
    return datetime.now(timezone.utc)


def _clean_personal_name(v: str) -> str:
    v = v.strip()
    if len(v) < 1 or len(v) > 255:
        raise ValueError("Personal name must be 1-255 characters")
    return v


def _clean_social_links(v: dict[str, str]) -> dict[str, str]:
    cleaned = {}
    for platform, url in v.items():
        if not platform.strip():
            raise ValueError("Social link platform must not be empty")
        cleaned[platform] = validate_url(url)
    return cleaned


class Identity(DomainModel):
    """Context-scoped profile owned by an account."""

    id: IdentityId
    owner_id: AccountId
    personal_name: str
    context: IdentityContext
    other_names: list[str] = Field(default_factory=list)
    pronouns: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None
    social_links: dict[str, str] = Field(default_factory=dict)
    is_primary: bool = False
    is_discoverable: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PublicIdentity(DomainModel):
    """Whitelisted view of a discoverable identity.

    Built field by field from storage; owner, flags and timestamps are never
    part of it.
    """

    id: IdentityId
    personal_name: str
    context: IdentityContext
    other_names: list[str] = Field(default_factory=list)
    pronouns: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None
    social_links: dict[str, str] = Field(default_factory=dict)


class IdentityDraft(DomainModel):
    """Validated input for creating an identity.

    Carries no id, owner or timestamps: those are assigned by the store.
    """

    personal_name: str
    context: IdentityContext
    other_names: list[str] = Field(default_factory=list)
    pronouns: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None
    social_links: dict[str, str] = Field(default_factory=dict)
    is_primary: bool = False
    is_discoverable: bool = False

    @field_validator("personal_name")
    @classmethod
    def validate_personal_name(cls, v: str) -> str:
        return _clean_personal_name(v)

    @field_validator("social_links")
    @classmethod
    def validate_social_links(cls, v: dict[str, str]) -> dict[str, str]:
        return _clean_social_links(v)


class IdentityPatch(DomainModel):
    """Validated partial update of an identity.

    Only fields the client actually sent are applied (``model_fields_set``);
    an explicit null clears an optional field. ``personal_name`` and
    ``context`` are required on the identity, so null is rejected for them.
    """

    personal_name: Optional[str] = None
    context: Optional[IdentityContext] = None
    other_names: Optional[list[str]] = None
    pronouns: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None
    social_links: Optional[dict[str, str]] = None
    is_primary: Optional[bool] = None
    is_discoverable: Optional[bool] = None

    @field_validator("personal_name", "context", mode="before")
    @classmethod
    def reject_null_for_required(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("personal_name")
    @classmethod
    def validate_personal_name(cls, v: str) -> str:
        return _clean_personal_name(v)

    @field_validator("social_links")
    @classmethod
    def validate_social_links(
        cls, v: Optional[dict[str, str]]
    ) -> Optional[dict[str, str]]:
        if v is None:
            return v
        return _clean_social_links(v)

    def changes(self) -> dict:
        """Fields explicitly present in the patch, ready for ``model_copy``.

        Nulls for list/mapping fields become empty collections and booleans
        are never nulled.
        """
        values = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None:
                if name == "other_names":
                    value = []
                elif name == "social_links":
                    value = {}
                elif name in ("is_primary", "is_discoverable"):
                    continue
            values[name] = value
        return values
