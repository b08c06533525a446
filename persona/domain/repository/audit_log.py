"""Audit log repository interface."""

from abc import ABC, abstractmethod

from persona.domain.model.audit_log import AuditLogEntry
from persona.domain.value import AccountId


class AuditLogRepository(ABC):
    """Append-only store for audit entries."""

    @abstractmethod
    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append an entry.

        Args:
            entry: Entry to store

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_all_by_owner(self, owner_id: AccountId) -> list[AuditLogEntry]:
        """Entries recorded for an account, oldest first."""
        pass
