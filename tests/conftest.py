"""
Pytest Configuration
====================

Shared fixtures. HTTP tests run the ASGI app in-process through httpx,
so no server needs to be started.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from users_api.config import Settings
from users_api.main import create_app
from users_api.store.user_store import get_user_store


@pytest.fixture(autouse=True)
def clear_store():
    """Start and finish every test with an empty user store."""
    store = get_user_store()
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def settings():
    """Settings independent of the surrounding environment / .env file."""
    return Settings(_env_file=None)


@pytest_asyncio.fixture
async def client(settings):
    """Async HTTP client bound to a fresh application instance."""
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def sample_user():
    """A valid create-user payload."""
    return {"name": "Ada Lovelace", "email": "ada@example.com"}
