"""In-memory audit log repository for testing."""

from persona.domain.model.audit_log import AuditLogEntry
from persona.domain.repository.audit_log import AuditLogRepository
from persona.domain.value import AccountId

from .database import InMemoryDatabase


class InMemoryAuditLogRepository(AuditLogRepository):
    """In-memory implementation of AuditLogRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append audit entry."""
        self.database.audit_logs.append(entry)
        return entry

    async def find_all_by_owner(self, owner_id: AccountId) -> list[AuditLogEntry]:
        """Entries for an account in insertion order."""
        return [e for e in self.database.audit_logs if e.owner_id == owner_id]
