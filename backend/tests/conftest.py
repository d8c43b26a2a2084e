from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog.dependencies import get_controller
from catalog.main import app
from catalog.services.catalog import CatalogController

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]


@pytest_asyncio.fixture
async def client(controller: CatalogController) -> AsyncIterator[AsyncClient]:
    """HTTP client whose session controller runs over the fake fetcher.

    ASGITransport does not run the lifespan, so the real HTTP client is never
    created; the controller dependency is overridden instead.
    """
    app.dependency_overrides[get_controller] = lambda: controller

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
