"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from persona.interface.api.app import create_app
from tests.conftest import auth_headers, make_account_id
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over a fresh in-memory container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def alice():
    """Authorization headers of one account."""
    return auth_headers(make_account_id())


@pytest.fixture
def bob():
    """Authorization headers of another account."""
    return auth_headers(make_account_id())
