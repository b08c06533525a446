"""PostgreSQL repository implementations."""

from persona.persistence.repository.account import PostgresAccountRepository
from persona.persistence.repository.audit_log import PostgresAuditLogRepository
from persona.persistence.repository.identity import PostgresIdentityRepository
from persona.persistence.repository.unit_of_work import PostgresUnitOfWork

__all__ = [
    "PostgresAccountRepository",
    "PostgresAuditLogRepository",
    "PostgresIdentityRepository",
    "PostgresUnitOfWork",
]
