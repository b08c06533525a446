"""CSV rendering.

Values are neutralized against spreadsheet formula injection before the csv
writer quotes them.
"""

import csv
import io
import json
from typing import Any, Iterable, Mapping

from persona.interface.api.formatter.envelope import (
    EnvelopeKind,
    envelope_kind,
    records,
)

COLUMNS = (
    "id",
    "personalName",
    "context",
    "otherNames",
    "pronouns",
    "title",
    "avatarUrl",
    "socialLinks",
    "isPrimary",
    "createdAt",
    "updatedAt",
)

FORMULA_PREFIXES = ("=", "+", "-", "@")


def escape_value(value: str) -> str:
    """Neutralize a cell that a spreadsheet would evaluate as a formula.

    >>> escape_value("=cmd|calc")
    "'=cmd|calc"
    """
    if value.startswith(FORMULA_PREFIXES):
        return "'" + value
    return value


def _cell(column: str, value: Any) -> str:
    if value is None:
        return ""
    if column == "otherNames":
        return ";".join(value)
    if column == "socialLinks":
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _row(cells: Iterable[str], quoting: int = csv.QUOTE_MINIMAL) -> str:
    # "\r\n" makes the writer quote cells holding either line break character.
    buffer = io.StringIO()
    csv.writer(buffer, quoting=quoting, lineterminator="\r\n").writerow(cells)
    return buffer.getvalue().removesuffix("\r\n")


def _error_document(message: str) -> str:
    return "\n".join([_row(["error"]), _row([message], quoting=csv.QUOTE_ALL)])


def render_csv(payload: Mapping[str, Any]) -> str:
    if envelope_kind(payload) is EnvelopeKind.ERROR:
        return _error_document(payload["message"])

    rows = records(payload)
    if not rows:
        return _error_document("No identities found")

    lines = [_row(COLUMNS)]
    for record in rows:
        lines.append(
            _row(escape_value(_cell(column, record.get(column))) for column in COLUMNS)
        )
    return "\n".join(lines)
