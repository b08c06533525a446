"""Exception handlers.

Domain and interface errors become structured bodies; anything else is a
logged 500 that never leaks internals.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from persona.domain.error import NotFoundError, PolicyError, ValidationError
from persona.interface.api.responses import formatted_response
from persona.interface.error import UnauthorizedError

# Location prefixes FastAPI puts in front of field paths
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def _error_payload(message: str, details: dict[str, list[str]] | None = None) -> dict:
    payload: dict[str, Any] = {"message": message}
    if details:
        payload["details"] = details
    return payload


def request_validation_details(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group FastAPI validation errors by dotted field path."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        key = ".".join(loc) or "body"
        details.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return details


async def handle_validation_error(request: Request, exc: ValidationError) -> Response:
    logfire.info("Validation error", path=request.url.path, fields=list(exc.field_errors))
    return formatted_response(
        request,
        _error_payload(exc.message, exc.field_errors),
        status.HTTP_400_BAD_REQUEST,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> Response:
    details = request_validation_details(exc)
    logfire.info("Request validation error", path=request.url.path, fields=list(details))
    return formatted_response(
        request,
        _error_payload("Validation error", details),
        status.HTTP_400_BAD_REQUEST,
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> Response:
    return formatted_response(
        request,
        _error_payload(f"{exc.resource} not found"),
        status.HTTP_404_NOT_FOUND,
    )


async def handle_policy_error(request: Request, exc: PolicyError) -> Response:
    return formatted_response(
        request, _error_payload(exc.message), status.HTTP_400_BAD_REQUEST
    )


async def handle_unauthorized(request: Request, exc: UnauthorizedError) -> Response:
    return formatted_response(
        request, _error_payload("Unauthorized"), status.HTTP_401_UNAUTHORIZED
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        _exc_info=exc,
    )
    return formatted_response(
        request,
        _error_payload("Internal server error"),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to ``app``."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(PolicyError, handle_policy_error)
    app.add_exception_handler(UnauthorizedError, handle_unauthorized)
    app.add_exception_handler(Exception, handle_unexpected_error)
