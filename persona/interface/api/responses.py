"""Response helpers shared by routes and error handlers."""

from typing import Any, Mapping, Optional

from fastapi import Request, Response

from persona.interface.api.formatter import ResponseFormat, negotiate, render


def response_format(request: Request) -> ResponseFormat:
    """Negotiated format for GET requests, JSON for everything else."""
    if request.method == "GET":
        return negotiate(request.headers.get("accept"))
    return ResponseFormat.JSON


def resource_base(request: Request, path: str) -> str:
    """Absolute URL prefix for resources under ``path``."""
    return str(request.base_url).rstrip("/") + path


def formatted_response(
    request: Request,
    payload: Mapping[str, Any],
    status_code: int = 200,
    resource_path: Optional[str] = None,
) -> Response:
    """Render ``payload`` in the representation the request negotiated."""
    rendered = render(
        payload,
        response_format(request),
        str(request.url),
        resource_base(request, resource_path) if resource_path else None,
    )
    return Response(
        content=rendered.body,
        status_code=status_code,
        media_type=rendered.content_type,
    )
