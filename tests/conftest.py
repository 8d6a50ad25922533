import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

# Configure settings for tests via the environment rather than hardcoding directly.
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from rental.core import config as _config  # noqa: E402
_config.get_settings.cache_clear()  # ensure new env vars are picked up # type: ignore[attr-defined]
_settings = _config.get_settings()

from rental.api import deps  # noqa: E402
from rental.api.main import app  # noqa: E402
from rental.core.security import issue_token  # noqa: E402
from rental.db.store import Store  # noqa: E402
from rental.models.user import Role, new_user_document  # noqa: E402

ADMIN_EMAIL = "root@example.com"

@pytest.fixture(scope="session")
def settings():
    """Expose application settings to tests if needed."""
    return _settings

@pytest_asyncio.fixture()
async def store():
    """Fresh in-memory database per test, so tests stay isolated."""
    s = Store(AsyncMongoMockClient(), "rentalDb_test")
    await s.ensure_indexes()
    yield s

@pytest_asyncio.fixture()
async def client(store):
    app.dependency_overrides[deps.get_store] = lambda: store
    # httpx >=0.28 removed the 'app=' shortcut; use ASGITransport explicitly
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture()
def bearer(settings):
    """Build an Authorization header for ``email`` (optionally issued at ``now``)."""
    def _bearer(email, now=None):
        return {"Authorization": f"Bearer {issue_token(email, settings, now=now)}"}
    return _bearer

@pytest_asyncio.fixture()
async def admin_email(store):
    await store.users.insert_one(new_user_document({"email": ADMIN_EMAIL}, Role.ADMIN))
    return ADMIN_EMAIL
