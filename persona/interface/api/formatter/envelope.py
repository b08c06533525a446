"""Envelope shapes accepted by the renderers."""

from enum import Enum
from typing import Any, Mapping

ERROR_KEYS = frozenset({"message", "details"})


class EnvelopeKind(str, Enum):
    LIST = "list"
    ERROR = "error"
    SINGLE = "single"


def envelope_kind(payload: Mapping[str, Any]) -> EnvelopeKind:
    """Classify a payload by its keys.

    A mapping with ``identities`` is a list, one holding only ``message``
    (and optionally ``details``) is an error, anything else is one record.
    """
    if "identities" in payload:
        return EnvelopeKind.LIST
    if "message" in payload and set(payload) <= ERROR_KEYS:
        return EnvelopeKind.ERROR
    return EnvelopeKind.SINGLE


def records(payload: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """Records carried by a list or single envelope."""
    if envelope_kind(payload) is EnvelopeKind.LIST:
        return list(payload["identities"])
    return [payload]
