"""Root conftest — shared test configuration and request payloads."""

import json

import pytest

from request_guard.config import get_settings


VALID_PAYLOAD: dict = {
    "email": "jane@example.com",
    "address": {"street": "Elm St", "street_no": 12},
    "pets": [{"name": "Rex"}, {"name": "Whiskers"}],
}


@pytest.fixture
def valid_payload() -> dict:
    return json.loads(json.dumps(VALID_PAYLOAD))


@pytest.fixture
def invalid_payload() -> dict:
    """One violation each on email, address.street, address.street_no, pets[0].name."""
    return {
        "email": "not-an-email",
        "address": {"street": "A", "street_no": 0},
        "pets": [{"name": "ab"}],
    }


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; every test starts from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
