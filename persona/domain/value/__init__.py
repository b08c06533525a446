"""Domain value objects for persona."""

from persona.domain.value.identifiers import AccountId, AuditLogId, IdentityId
from persona.domain.value.types import (
    AuditEntity,
    AuditOperation,
    IdentityContext,
    SearchQuery,
    validate_url,
)

__all__ = [
    # Identifiers
    "AccountId",
    "AuditLogId",
    "IdentityId",
    # Types
    "AuditEntity",
    "AuditOperation",
    "IdentityContext",
    "SearchQuery",
    "validate_url",
]
