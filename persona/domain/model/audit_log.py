"""Audit log entry.

Append-only record of every identity mutation and every cross-account read.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.model.identity import utcnow
from persona.domain.value import AccountId, AuditEntity, AuditLogId, AuditOperation


class AuditLogEntry(DomainModel):
    """Immutable audit record.

    ``owner_id`` is the account whose data was touched, or the account that
    performed a cross-account read. ``entity_id`` is None for searches that
    do not target a single identity.
    """

    id: AuditLogId
    owner_id: AccountId
    entity: AuditEntity = AuditEntity.IDENTITY
    entity_id: Optional[str] = None
    operation: AuditOperation
    diff: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utcnow)
