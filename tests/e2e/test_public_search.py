"""End-to-end tests for public search endpoints."""

import xml.etree.ElementTree as ET

import pytest


def _create(client, headers, **body):
    body.setdefault("personalName", "Test Identity")
    body.setdefault("context", "work")
    body.setdefault("isDiscoverable", True)
    response = client.post("/identities", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestSearch:
    """GET /public/identities/search."""

    def test_search_requires_authentication(self, client):
        # Act
        response = client.get("/public/identities/search?context=work")

        # Assert
        assert response.status_code == 401

    def test_search_requires_context(self, client, alice):
        # Act
        response = client.get("/public/identities/search", headers=alice)

        # Assert
        assert response.status_code == 400
        assert "context" in response.json()["details"]

    def test_search_finds_other_accounts_discoverable_identities(
        self, client, alice, bob
    ):
        # Arrange
        visible = _create(client, alice, personalName="Visible")
        _create(client, alice, personalName="Hidden", isDiscoverable=False)

        # Act
        response = client.get("/public/identities/search?context=work", headers=bob)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [i["id"] for i in body["identities"]] == [visible["id"]]
        assert body["hasMore"] is False
        assert "ownerId" not in body["identities"][0]
        assert "isDiscoverable" not in body["identities"][0]

    def test_limit_one_reports_more(self, client, alice, bob):
        # Arrange
        _create(client, alice, personalName="Older")
        newer = _create(client, alice, personalName="Newer")

        # Act
        body = client.get(
            "/public/identities/search?context=work&limit=1", headers=bob
        ).json()

        # Assert
        assert [i["id"] for i in body["identities"]] == [newer["id"]]
        assert body["hasMore"] is True

    @pytest.mark.parametrize("limit", ["0", "51", "many"])
    def test_bad_limit_is_rejected(self, client, bob, limit):
        # Act
        response = client.get(
            f"/public/identities/search?context=work&limit={limit}", headers=bob
        )

        # Assert
        assert response.status_code == 400
        assert "limit" in response.json()["details"]

    def test_text_query(self, client, alice, bob):
        # Arrange
        match = _create(client, alice, personalName="Jordan Lee")
        _create(client, alice, personalName="Sam Park")

        # Act
        body = client.get(
            "/public/identities/search?context=work&q=JORDAN", headers=bob
        ).json()

        # Assert
        assert [i["id"] for i in body["identities"]] == [match["id"]]


class TestSearchFormats:
    """Content negotiation on search results."""

    def test_csv(self, client, alice, bob):
        # Arrange
        _create(client, alice)

        # Act
        response = client.get(
            "/public/identities/search?context=work",
            headers={**bob, "Accept": "text/csv"},
        )

        # Assert
        assert response.headers["content-type"].startswith("text/csv")
        assert "personalName" in response.text
        assert "Test Identity" in response.text

    def test_xml(self, client, alice, bob):
        # Arrange
        _create(client, alice, personalName="Evil ]]> name")

        # Act
        response = client.get(
            "/public/identities/search?context=work",
            headers={**bob, "Accept": "application/xml"},
        )

        # Assert
        assert response.headers["content-type"].startswith("application/xml")
        assert response.text.startswith('<?xml version="1.0"')
        assert "<identities>" in response.text
        root = ET.fromstring(response.content)
        assert root.findtext("hasMore") == "false"
        assert root.find("identity").findtext("personalName") == "Evil ]]> name"

    def test_json_api(self, client, alice, bob):
        # Arrange
        identity = _create(client, alice)

        # Act
        response = client.get(
            "/public/identities/search?context=work",
            headers={**bob, "Accept": "application/vnd.api+json"},
        )

        # Assert
        assert response.headers["content-type"].startswith("application/vnd.api+json")
        document = response.json()
        assert {"data", "links", "meta"} <= set(document)
        assert document["data"][0]["links"]["self"] == (
            f"http://testserver/public/identities/{identity['id']}"
        )


class TestGetPublicIdentity:
    """GET /public/identities/{id}."""

    def test_discoverable_identity(self, client, alice, bob):
        # Arrange
        identity = _create(client, alice, pronouns="she/her")

        # Act
        response = client.get(f"/public/identities/{identity['id']}", headers=bob)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["pronouns"] == "she/her"
        assert "ownerId" not in body

    def test_hidden_identity_is_not_found(self, client, alice, bob):
        # Arrange
        identity = _create(client, alice, isDiscoverable=False)

        # Act
        response = client.get(f"/public/identities/{identity['id']}", headers=bob)

        # Assert
        assert response.status_code == 404
        assert response.json() == {"message": "Identity not found"}
