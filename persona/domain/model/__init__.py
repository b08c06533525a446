"""Domain model entities for persona."""

from persona.domain.model.account import Account
from persona.domain.model.audit_log import AuditLogEntry
from persona.domain.model.identity import (
    Identity,
    IdentityDraft,
    IdentityPatch,
    PublicIdentity,
)

__all__ = [
    "Account",
    "AuditLogEntry",
    "Identity",
    "IdentityDraft",
    "IdentityPatch",
    "PublicIdentity",
]
