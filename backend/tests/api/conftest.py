"""API test fixtures — FastAPI app behind an httpx client.

Invariants:
    - No network: requests go straight into the ASGI app
    - raise_app_exceptions=False so the catch-all 500 handler is observable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from request_guard.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
