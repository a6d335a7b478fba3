"""Service test fixtures: FastAPI app over a pre-seeded store + async test client.

Invariants:
    - Every test gets a fresh PersonStore seeded from the root seed_persons fixture
    - The store is injected through create_app(), never patched into a global

Design Decisions:
    - httpx ASGITransport does not run lifespan: the store is initialized by the
      fixture, so no CSV is read during route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from person_mcp.config import Settings
from person_mcp.main import create_app
from person_mcp.services.tool_dispatch import ToolDispatch


@pytest.fixture
def app(store):
    return create_app(store=store, settings=Settings(log_format="text"))


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the injected store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def dispatch(store) -> ToolDispatch:
    return ToolDispatch(store)
