"""Repository interfaces for persona domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from persona.domain.repository.account import AccountRepository
from persona.domain.repository.audit_log import AuditLogRepository
from persona.domain.repository.identity import IdentityRepository
from persona.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "AccountRepository",
    "AuditLogRepository",
    "IdentityRepository",
    "UnitOfWork",
]
