"""Test configuration and fixtures."""

from uuid import UUID, uuid4

import logfire

from persona.config import Settings
from persona.domain.model import IdentityDraft
from persona.domain.value import AccountId, IdentityContext
from persona.util.jwt import create_token

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


def make_account_id() -> AccountId:
    """Fresh account ID."""
    return AccountId(uuid4())


def make_draft(
    personal_name: str = "Alex Smith",
    context: IdentityContext = IdentityContext.WORK,
    **overrides,
) -> IdentityDraft:
    """Build a valid identity draft, overriding any field by keyword."""
    return IdentityDraft(personal_name=personal_name, context=context, **overrides)


def make_token(account_id: UUID | str) -> str:
    """Token for ``account_id`` signed with the configured test secret."""
    return create_token(str(account_id), Settings().auth)


def auth_headers(account_id: UUID | str) -> dict[str, str]:
    """Authorization header for ``account_id``."""
    return {"Authorization": f"Bearer {make_token(account_id)}"}
