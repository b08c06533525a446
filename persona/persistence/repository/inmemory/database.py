"""Shared state for the in-memory repositories."""

from copy import copy
from dataclasses import dataclass, field

from persona.domain.model import Account, AuditLogEntry, Identity
from persona.domain.value import AccountId


@dataclass
class InMemoryDatabase:
    """Tables held in process memory.

    Repositories of one container share an instance so a transaction can
    roll identities and audit entries back together.
    """

    accounts: dict[AccountId, Account] = field(default_factory=dict)
    identities: list[Identity] = field(default_factory=list)
    audit_logs: list[AuditLogEntry] = field(default_factory=list)

    def snapshot(self) -> "InMemoryDatabase":
        """Shallow copy of every table; rows are frozen models."""
        return InMemoryDatabase(
            accounts=copy(self.accounts),
            identities=copy(self.identities),
            audit_logs=copy(self.audit_logs),
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        """Replace table contents with a previous snapshot."""
        self.accounts = snapshot.accounts
        self.identities = snapshot.identities
        self.audit_logs = snapshot.audit_logs
