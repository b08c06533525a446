"""Sample envelopes in wire format."""

import pytest


@pytest.fixture
def identity_record():
    return {
        "id": "3f1c2a5e-8d4b-4f6a-9c1e-2b7d8e9f0a1b",
        "ownerId": "0a9b8c7d-6e5f-4a3b-2c1d-0e9f8a7b6c5d",
        "personalName": "Alex Smith",
        "context": "work",
        "otherNames": ["Alexander Smith", "A. Smith"],
        "pronouns": "they/them",
        "title": "Engineer",
        "avatarUrl": None,
        "socialLinks": {"github": "https://github.com/alex"},
        "isPrimary": True,
        "isDiscoverable": False,
        "createdAt": "2024-01-01T12:00:00Z",
        "updatedAt": "2024-01-02T12:00:00Z",
    }


@pytest.fixture
def public_record():
    return {
        "id": "7e6d5c4b-3a29-4180-9f8e-7d6c5b4a3928",
        "personalName": "Jordan Lee",
        "context": "work",
        "otherNames": [],
        "pronouns": None,
        "title": None,
        "avatarUrl": None,
        "socialLinks": {},
    }
