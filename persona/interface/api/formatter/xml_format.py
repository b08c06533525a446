"""XML rendering.

Text content is wrapped in CDATA; attribute values are entity-escaped. Characters
XML 1.0 cannot represent are dropped from both.
"""

import re
from typing import Any, Mapping
from xml.sax.saxutils import quoteattr

from persona.interface.api.formatter.envelope import (
    EnvelopeKind,
    envelope_kind,
    records,
)

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

LEAVES = ("id", "personalName", "context")
TRAILING_LEAVES = ("pronouns", "title", "avatarUrl")
TIMESTAMP_LEAVES = ("createdAt", "updatedAt")

# Everything outside the XML 1.0 Char production.
INVALID_XML_CHARS = re.compile(
    r"[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def xml_text(value: Any) -> str:
    """Text of ``value`` with characters invalid in XML removed."""
    return INVALID_XML_CHARS.sub("", str(value))


def cdata(value: Any) -> str:
    """Wrap text in CDATA, splitting any ``]]>`` across two sections."""
    text = xml_text(value)
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _leaf(name: str, value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"<{name}>{cdata(value)}</{name}>"


def _present(value: Any) -> bool:
    return value is not None and value != "" and value != [] and value != {}


def _identity(record: Mapping[str, Any]) -> str:
    parts = ["  <identity>"]

    for name in LEAVES:
        if _present(record.get(name)):
            parts.append("    " + _leaf(name, record[name]))

    other_names = record.get("otherNames")
    if _present(other_names):
        parts.append("    <otherNames>")
        parts.extend(f"      {_leaf('name', name)}" for name in other_names)
        parts.append("    </otherNames>")

    for name in TRAILING_LEAVES:
        if _present(record.get(name)):
            parts.append("    " + _leaf(name, record[name]))

    social_links = record.get("socialLinks")
    if _present(social_links):
        parts.append("    <socialLinks>")
        for platform, url in social_links.items():
            attribute = quoteattr(xml_text(platform))
            parts.append(f"      <link platform={attribute}>{cdata(url)}</link>")
        parts.append("    </socialLinks>")

    if "isPrimary" in record:
        parts.append("    " + _leaf("isPrimary", bool(record["isPrimary"])))

    for name in TIMESTAMP_LEAVES:
        if _present(record.get(name)):
            parts.append("    " + _leaf(name, record[name]))

    parts.append("  </identity>")
    return "\n".join(parts)


def render_xml(payload: Mapping[str, Any]) -> str:
    if envelope_kind(payload) is EnvelopeKind.ERROR:
        return "\n".join(
            [
                DECLARATION,
                "<response>",
                "  <error>",
                f"    <message>{cdata(payload['message'])}</message>",
                "  </error>",
                "</response>",
            ]
        )

    lines = [DECLARATION, "<identities>"]
    if "hasMore" in payload:
        lines.append("  " + _leaf("hasMore", bool(payload["hasMore"])))
    lines.extend(_identity(record) for record in records(payload))
    lines.append("</identities>")
    return "\n".join(lines)
