"""API test fixtures — FastAPI test client with the capability loader overridden.

Invariants:
    - Every test gets its own loader; the process singleton is never touched
    - get_capability_loader dependency overridden per client
    - In-memory edit sessions cleared after every test

Design Decisions:
    - ASGITransport does not run lifespan, so no real acquisition starts in tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from playground.api.routes.session_lifecycle import _edit_sessions
from playground.infrastructure.capability_loader import (
    CapabilityLoader, get_capability_loader,
)
from playground.main import app


@pytest.fixture
async def make_client():
    """Factory: build a client whose routes see the given loader."""
    clients = []

    async def _make(loader: CapabilityLoader) -> AsyncClient:
        app.dependency_overrides[get_capability_loader] = lambda: loader
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
    _edit_sessions.clear()


@pytest.fixture
async def ready_loader(counting_capability):
    loader = CapabilityLoader(lambda: counting_capability)
    await loader.acquire()
    return loader


@pytest.fixture
def loading_loader():
    """Loader that was never started — stays LOADING."""
    return CapabilityLoader(lambda: str.upper)


@pytest.fixture
async def failed_loader():
    loader = CapabilityLoader.from_entrypoint("no_such_parser_module:parse")
    await loader.acquire()
    return loader


@pytest.fixture
async def client(make_client, ready_loader):
    return await make_client(ready_loader)


@pytest.fixture
async def exploding_client(make_client, exploding_capability):
    loader = CapabilityLoader(lambda: exploding_capability)
    await loader.acquire()
    return await make_client(loader)
