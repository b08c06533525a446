"""Audit recorder domain service."""

from typing import Any, Optional
from uuid import uuid4

import logfire

from persona.domain.model.audit_log import AuditLogEntry
from persona.domain.model.identity import Identity
from persona.domain.repository.audit_log import AuditLogRepository
from persona.domain.value import AccountId, AuditLogId, AuditOperation

from .base import Service


def snapshot(identity: Identity) -> dict[str, Any]:
    """JSON-ready copy of an identity for audit diffs."""
    return identity.model_dump(mode="json")


class AuditService(Service):
    """Appends audit entries.

    Called by the other domain services inside their transaction so an entry
    is stored if and only if the change it describes is stored.
    """

    def __init__(self, audit_log_repository: AuditLogRepository) -> None:
        """Initialize audit service.

        Args:
            audit_log_repository: Audit log repository
        """
        self.audit_log_repository = audit_log_repository

    async def record(
        self,
        owner_id: AccountId,
        operation: AuditOperation,
        diff: dict[str, Any],
        entity_id: Optional[str] = None,
    ) -> AuditLogEntry:
        """Append one audit entry.

        Args:
            owner_id: Account whose data was touched, or the reading account
            operation: What happened
            diff: Before/after snapshots or access metadata
            entity_id: Identity ID, when the entry concerns one identity

        Returns:
            The stored entry
        """
        entry = AuditLogEntry(
            id=AuditLogId(uuid4()),
            owner_id=owner_id,
            entity_id=entity_id,
            operation=operation,
            diff=diff,
        )
        saved = await self.audit_log_repository.append(entry)
        logfire.debug(
            "Audit entry recorded",
            owner_id=str(owner_id),
            operation=operation.value,
            entity_id=entity_id,
        )
        return saved

    async def list_entries(self, owner_id: AccountId) -> list[AuditLogEntry]:
        """Entries recorded for an account, oldest first."""
        return await self.audit_log_repository.find_all_by_owner(owner_id)
