"""Domain value objects for persona.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import AnyUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from persona.domain.value.common import ValueObject

_url_adapter = TypeAdapter(AnyUrl)


class IdentityContext(str, Enum):
    """Context an identity is presented in."""

    LEGAL = "legal"
    WORK = "work"
    SOCIAL = "social"
    GAMING = "gaming"


class AuditOperation(str, Enum):
    """Operation recorded in the audit log."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    SET_PRIMARY = "set-primary"
    CROSS_USER_ACCESS = "cross-user-access"


class AuditEntity(str, Enum):
    """Entity kinds the audit log records."""

    IDENTITY = "identity"


class SearchQuery(ValueObject):
    """Public search parameters.

    ``limit`` is optional here; the search service applies the configured
    default and upper bound.
    """

    context: IdentityContext
    q: str | None = None
    limit: int | None = None

    @field_validator("q")
    @classmethod
    def blank_query_means_no_filter(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


def validate_url(value: str) -> str:
    """Check that ``value`` is a well-formed absolute URL.

    The original string is returned unchanged so stored links round-trip
    exactly as the client sent them.

    Raises:
        ValueError: If the value does not parse as a URL with scheme and host
    """
    try:
        parsed = _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"Invalid URL: {value!r}")
    if not parsed.host:
        raise ValueError(f"Invalid URL: {value!r}")
    return value
