"""JSON:API rendering."""

import json
from typing import Any, Mapping, Optional

from persona.interface.api.formatter.envelope import EnvelopeKind, envelope_kind

RESOURCE_TYPE = "identity"


def _resource(record: Mapping[str, Any], resource_base: Optional[str]) -> dict:
    resource: dict[str, Any] = {
        "type": RESOURCE_TYPE,
        "id": record.get("id"),
        "attributes": {k: v for k, v in record.items() if k != "id"},
    }
    if resource_base:
        resource["links"] = {"self": f"{resource_base.rstrip('/')}/{record.get('id')}"}
    return resource


def render_jsonapi(
    payload: Mapping[str, Any], request_url: str, resource_base: Optional[str]
) -> str:
    kind = envelope_kind(payload)

    if kind is EnvelopeKind.ERROR:
        error: dict[str, Any] = {"title": payload["message"]}
        if payload.get("details"):
            error["meta"] = {"details": payload["details"]}
        return json.dumps({"errors": [error]})

    if kind is EnvelopeKind.SINGLE:
        return json.dumps({"data": _resource(payload, resource_base)})

    identities = payload["identities"]
    primary = payload.get("primary")
    meta: dict[str, Any] = {
        "total": len(identities),
        "primary": primary.get("id") if primary else None,
    }
    if "hasMore" in payload:
        meta["hasMore"] = payload["hasMore"]

    return json.dumps(
        {
            "data": [_resource(record, resource_base) for record in identities],
            "meta": meta,
            "links": {"self": request_url},
        }
    )
