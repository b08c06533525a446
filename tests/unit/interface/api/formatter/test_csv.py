"""Unit tests for CSV rendering."""

import pytest

from persona.interface.api.formatter import ResponseFormat, render
from persona.interface.api.formatter.csv_format import escape_value

HEADER = (
    "id,personalName,context,otherNames,pronouns,title,avatarUrl,"
    "socialLinks,isPrimary,createdAt,updatedAt"
)


def _render(payload):
    return render(payload, ResponseFormat.CSV, "http://testserver/identities")


class TestCsv:
    """CSV documents."""

    def test_header_is_exact(self, identity_record):
        rendered = _render({"identities": [identity_record]})

        assert rendered.content_type == "text/csv; charset=utf-8"
        assert rendered.body.split("\n")[0] == HEADER

    def test_row_values(self, identity_record):
        row = _render({"identities": [identity_record]}).body.split("\n")[1]

        assert row == (
            f"{identity_record['id']},Alex Smith,work,Alexander Smith;A. Smith,"
            'they/them,Engineer,,"{""github"": ""https://github.com/alex""}",'
            "true,2024-01-01T12:00:00Z,2024-01-02T12:00:00Z"
        )

    def test_public_records_leave_private_columns_empty(self, public_record):
        row = _render({"identities": [public_record], "hasMore": False}).body.split("\n")[1]

        assert row.endswith(",{},,,")

    def test_single_record_renders_one_row(self, identity_record):
        lines = _render(identity_record).body.split("\n")

        assert len(lines) == 2

    def test_formula_is_neutralized(self, identity_record):
        record = {**identity_record, "personalName": "=cmd|calc"}

        row = _render({"identities": [record]}).body.split("\n")[1]

        assert ",'=cmd|calc," in row

    def test_empty_list_is_an_error_document(self):
        assert _render({"identities": []}).body == 'error\n"No identities found"'

    def test_error_envelope(self):
        assert _render({"message": "Unauthorized"}).body == 'error\n"Unauthorized"'


class TestEscapeValue:
    """Formula neutralization."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("plain", "plain"),
            ("=SUM(A1)", "'=SUM(A1)"),
            ("+1", "'+1"),
            ("-1", "'-1"),
            ("@handle", "'@handle"),
            ("a=b", "a=b"),
        ],
    )
    def test_escape_value(self, value, expected):
        assert escape_value(value) == expected


class TestQuoting:
    """Cells are quoted only when they need to be."""

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("two\nlines", '"two\nlines"'),
            ("cr\rhere", '"cr\rhere"'),
            ("=a,b", "\"'=a,b\""),
        ],
    )
    def test_title_cell(self, public_record, title, expected):
        record = {**public_record, "title": title}

        body = _render({"identities": [record]}).body

        assert f",{expected},," in body

    def test_error_message_is_always_quoted(self):
        assert _render({"message": "Not, found"}).body == 'error\n"Not, found"'
