"""Strongly typed identifiers for persona domain entities.

NewType keeps account ids and identity ids from being swapped by accident
in ownership-checked calls such as ``get_identity(identity_id, owner_id)``.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
IdentityId = NewType("IdentityId", UUID)
AuditLogId = NewType("AuditLogId", UUID)
