"""Shared fixtures for API integration tests.

The app lifespan is not run by ASGITransport; instead the summary
extractor is placed on app.state directly, wired to the fake client
and a temporary config file.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.scraper.fanza import FanzaContext, FanzaSummaryExtractor, SummaryCache
from tests.conftest import FakeFanzaClient


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


@pytest.fixture
def summary_extractor(make_store, fake_client: FakeFanzaClient) -> FanzaSummaryExtractor:
    """Extractor with empty mapping tables and the fake client."""
    context = FanzaContext(store=make_store(), cache=SummaryCache(), client=fake_client)
    return FanzaSummaryExtractor(context)


@pytest.fixture
async def client(summary_extractor: FanzaSummaryExtractor) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the real app."""
    from src.api.main import app

    app.state.summary_extractor = summary_extractor
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.state.summary_extractor = None
