"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from persona.domain.model import Account, AuditLogEntry, Identity, PublicIdentity
from persona.domain.value import (
    AccountId,
    AuditEntity,
    AuditLogId,
    AuditOperation,
    IdentityContext,
    IdentityId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        email=row.get("email"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return account.model_dump()


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert database row to Identity domain model.

    Args:
        row: Database row as dict

    Returns:
        Identity domain model
    """
    return Identity(
        id=IdentityId(_uuid(row["id"])),
        owner_id=AccountId(_uuid(row["owner_id"])),
        personal_name=row["personal_name"],
        context=IdentityContext(row["context"]),
        other_names=list(row.get("other_names") or []),
        pronouns=row.get("pronouns"),
        title=row.get("title"),
        avatar_url=row.get("avatar_url"),
        social_links=dict(row.get("social_links") or {}),
        is_primary=row["is_primary"],
        is_discoverable=row["is_discoverable"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to database dict.

    Args:
        identity: Identity domain model

    Returns:
        Dict suitable for database insertion/update
    """
    values = identity.model_dump()
    values["context"] = identity.context.value
    return values


def row_to_public_identity(row: Dict[str, Any]) -> PublicIdentity:
    """Convert a row of whitelisted columns to PublicIdentity.

    Args:
        row: Row selected with ``PUBLIC_IDENTITY_COLUMNS`` only

    Returns:
        PublicIdentity projection
    """
    return PublicIdentity(
        id=IdentityId(_uuid(row["id"])),
        personal_name=row["personal_name"],
        context=IdentityContext(row["context"]),
        other_names=list(row.get("other_names") or []),
        pronouns=row.get("pronouns"),
        title=row.get("title"),
        avatar_url=row.get("avatar_url"),
        social_links=dict(row.get("social_links") or {}),
    )


def row_to_audit_log_entry(row: Dict[str, Any]) -> AuditLogEntry:
    """Convert database row to AuditLogEntry domain model."""
    return AuditLogEntry(
        id=AuditLogId(_uuid(row["id"])),
        owner_id=AccountId(_uuid(row["owner_id"])),
        entity=AuditEntity(row["entity"]),
        entity_id=row.get("entity_id"),
        operation=AuditOperation(row["operation"]),
        diff=row.get("diff") or {},
        created_at=row["created_at"],
    )


def audit_log_entry_to_dict(entry: AuditLogEntry) -> Dict[str, Any]:
    """Convert AuditLogEntry domain model to database dict."""
    values = entry.model_dump()
    values["entity"] = entry.entity.value
    values["operation"] = entry.operation.value
    return values
