"""Response formatter.

Turns a JSON-ready envelope (camelCase wire names) into one of the
negotiated representations. All functions here are pure.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from persona.interface.api.formatter.csv_format import render_csv
from persona.interface.api.formatter.envelope import EnvelopeKind, envelope_kind
from persona.interface.api.formatter.jsonapi_format import render_jsonapi
from persona.interface.api.formatter.xml_format import render_xml


class ResponseFormat(str, Enum):
    """Representations a client can ask for through ``Accept``."""

    JSON = "json"
    JSON_API = "json-api"
    CSV = "csv"
    XML = "xml"


CONTENT_TYPES: dict[ResponseFormat, str] = {
    ResponseFormat.JSON: "application/json",
    ResponseFormat.JSON_API: "application/vnd.api+json",
    ResponseFormat.CSV: "text/csv; charset=utf-8",
    ResponseFormat.XML: "application/xml; charset=utf-8",
}

# Checked in order, first substring match wins
_ACCEPT_RULES: tuple[tuple[str, ResponseFormat], ...] = (
    ("application/vnd.api+json", ResponseFormat.JSON_API),
    ("text/csv", ResponseFormat.CSV),
    ("application/xml", ResponseFormat.XML),
)


@dataclass(frozen=True)
class RenderedResponse:
    """Serialized body and its content type."""

    body: str
    content_type: str


def negotiate(accept: Optional[str]) -> ResponseFormat:
    """Pick a representation from an ``Accept`` header, JSON by default."""
    if accept:
        for media_type, response_format in _ACCEPT_RULES:
            if media_type in accept:
                return response_format
    return ResponseFormat.JSON


def render(
    payload: Mapping[str, Any],
    response_format: ResponseFormat,
    request_url: str,
    resource_base: Optional[str] = None,
) -> RenderedResponse:
    """Render an envelope.

    Args:
        payload: List, single or error envelope with camelCase keys
        response_format: Negotiated representation
        request_url: URL of the current request (JSON:API ``links.self``)
        resource_base: URL prefix of single resources (JSON:API resource links)

    Returns:
        Body and content type
    """
    if response_format is ResponseFormat.JSON_API:
        body = render_jsonapi(payload, request_url, resource_base)
    elif response_format is ResponseFormat.CSV:
        body = render_csv(payload)
    elif response_format is ResponseFormat.XML:
        body = render_xml(payload)
    else:
        body = json.dumps(payload)

    return RenderedResponse(body=body, content_type=CONTENT_TYPES[response_format])


__all__ = [
    "CONTENT_TYPES",
    "EnvelopeKind",
    "RenderedResponse",
    "ResponseFormat",
    "envelope_kind",
    "negotiate",
    "render",
]
