"""Audit log repository implementation using PostgreSQL."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model.audit_log import AuditLogEntry
from persona.domain.repository.audit_log import AuditLogRepository
from persona.domain.value import AccountId
from persona.persistence.mappers import audit_log_entry_to_dict, row_to_audit_log_entry
from persona.persistence.tables import audit_logs_table


class PostgresAuditLogRepository(AuditLogRepository):
    """PostgreSQL implementation of AuditLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Insert an audit entry."""
        stmt = audit_logs_table.insert().values(**audit_log_entry_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()
        return entry

    async def find_all_by_owner(self, owner_id: AccountId) -> list[AuditLogEntry]:
        """Entries for an account, oldest first."""
        stmt = (
            select(audit_logs_table)
            .where(audit_logs_table.c.owner_id == owner_id)
            .order_by(audit_logs_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_audit_log_entry(dict(row)) for row in result.mappings().all()]
