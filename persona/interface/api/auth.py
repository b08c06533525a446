"""Request authentication.

The token comes from the ``auth_token`` cookie or an ``Authorization: Bearer``
header; the header wins when both are present.
"""

from typing import Annotated

import logfire
from fastapi import Depends, Request

from persona.application.usecase.auth import (
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
)
from persona.domain.value import AccountId
from persona.interface.error import UnauthorizedError
from persona.util.error import TokenError

BEARER_PREFIX = "bearer "


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Read the raw token from the request, if any."""
    authorization = request.headers.get("authorization")
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return request.cookies.get(cookie_name) or None


async def authenticate(
    request: Request, get_current_account: GetCurrentAccountUseCase
) -> AccountId:
    """Resolve the authenticated account for a request.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    token = extract_token(request, get_current_account.cookie_name)
    if not token:
        raise UnauthorizedError("Missing authentication token")

    try:
        return await get_current_account.execute(GetCurrentAccountRequest(token=token))
    except TokenError as e:
        logfire.warn("Authentication failed", path=request.url.path, error=str(e))
        raise UnauthorizedError(str(e))


async def current_account(request: Request) -> AccountId:
    """FastAPI dependency returning the authenticated account.

    Runs before body and query validation, so unauthenticated requests get a
    401 whatever else is wrong with them.
    """
    container = request.state.dishka_container
    get_current_account = await container.get(GetCurrentAccountUseCase)
    return await authenticate(request, get_current_account)


CurrentAccount = Annotated[AccountId, Depends(current_account)]
