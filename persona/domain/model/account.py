"""Account aggregate root.

Accounts come from the external authentication service. This API only
needs the row to exist so identities and audit entries can reference it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.model.identity import utcnow
from persona.domain.value import AccountId


class Account(DomainModel):
    """Authenticated account owning identities."""

    id: AccountId
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
