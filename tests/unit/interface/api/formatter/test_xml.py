"""Unit tests for XML rendering."""

import xml.etree.ElementTree as ET

from persona.interface.api.formatter import ResponseFormat, render
from persona.interface.api.formatter.xml_format import cdata


def _render(payload):
    return render(payload, ResponseFormat.XML, "http://testserver/identities")


class TestXml:
    """XML documents."""

    def test_document_is_well_formed(self, identity_record):
        rendered = _render({"identities": [identity_record]})

        assert rendered.content_type == "application/xml; charset=utf-8"
        assert rendered.body.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        root = ET.fromstring(rendered.body.encode("utf-8"))
        assert root.tag == "identities"
        identity = root.find("identity")
        assert identity.findtext("personalName") == "Alex Smith"
        assert [n.text for n in identity.find("otherNames")] == [
            "Alexander Smith",
            "A. Smith",
        ]
        assert identity.find("socialLinks/link").get("platform") == "github"
        assert identity.findtext("isPrimary") == "true"

    def test_leaves_follow_fixed_order(self, identity_record):
        root = ET.fromstring(_render(identity_record).body.encode("utf-8"))

        assert [child.tag for child in root.find("identity")] == [
            "id",
            "personalName",
            "context",
            "otherNames",
            "pronouns",
            "title",
            "socialLinks",
            "isPrimary",
            "createdAt",
            "updatedAt",
        ]

    def test_empty_optional_values_are_omitted(self, public_record):
        root = ET.fromstring(_render({"identities": [public_record]}).body.encode("utf-8"))

        assert [child.tag for child in root.find("identity")] == [
            "id",
            "personalName",
            "context",
        ]

    def test_cdata_terminator_in_text_survives(self, identity_record):
        record = {**identity_record, "personalName": "Evil ]]> <name>&"}

        root = ET.fromstring(_render({"identities": [record]}).body.encode("utf-8"))

        assert root.find("identity").findtext("personalName") == "Evil ]]> <name>&"

    def test_platform_attribute_is_escaped(self, identity_record):
        record = {**identity_record, "socialLinks": {'a"<b>&': "https://example.com"}}

        root = ET.fromstring(_render({"identities": [record]}).body.encode("utf-8"))

        assert root.find("identity/socialLinks/link").get("platform") == 'a"<b>&'

    def test_has_more_is_a_child_of_a_bare_root(self, public_record):
        body = _render({"identities": [public_record], "hasMore": True}).body

        assert "\n<identities>\n" in body
        root = ET.fromstring(body.encode("utf-8"))
        assert root.attrib == {}
        assert root.findtext("hasMore") == "true"
        assert len(root.findall("identity")) == 1

    def test_control_characters_are_dropped(self, identity_record):
        record = {
            **identity_record,
            "personalName": "Alex\x01Smith",
            "otherNames": ["A.\x0bSmith"],
            "socialLinks": {"git\x1fhub": "https://github.com/alex"},
        }

        root = ET.fromstring(_render({"identities": [record]}).body.encode("utf-8"))

        identity = root.find("identity")
        assert identity.findtext("personalName") == "AlexSmith"
        assert identity.findtext("otherNames/name") == "A.Smith"
        assert identity.find("socialLinks/link").get("platform") == "github"

    def test_whitespace_controls_are_kept(self, identity_record):
        record = {**identity_record, "title": "Line one\nLine\ttwo"}

        root = ET.fromstring(_render(record).body.encode("utf-8"))

        assert root.find("identity").findtext("title") == "Line one\nLine\ttwo"

    def test_error_envelope(self):
        root = ET.fromstring(_render({"message": "Identity not found"}).body.encode("utf-8"))

        assert root.tag == "response"
        assert root.findtext("error/message") == "Identity not found"


class TestCdata:
    """CDATA wrapping."""

    def test_terminator_is_split(self):
        assert cdata("a]]>b") == "<![CDATA[a]]]]><![CDATA[>b]]>"

    def test_invalid_characters_are_removed(self):
        assert cdata("a\x00b\x08c\ufffed") == "<![CDATA[abcd]]>"
