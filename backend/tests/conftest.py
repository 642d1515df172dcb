"""
Pytest configuration and fixtures for tableview backend tests.
"""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from backend.main import app
from backend.services.recordset_loader import recordset_store


@pytest.fixture(autouse=True)
def demo_recordset():
    """Serve the demo contacts for every test; restore afterwards."""
    previous = (recordset_store.recordset, recordset_store.source)
    recordset_store.load("")
    yield recordset_store.recordset
    recordset_store.recordset, recordset_store.source = previous


@pytest_asyncio.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
