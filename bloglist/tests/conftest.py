"""Shared fixtures for bloglist tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.services.security import BcryptHasher
from bloglist.services.storage import InMemoryStore
from bloglist.tests.helpers import INITIAL_BLOGS


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from bloglist.config import get_settings

    get_settings.cache_clear()

    # 2. Store singletons
    import bloglist.services.storage as storage_mod

    storage_mod._blog_store = None
    storage_mod._user_store = None

    # 3. Dependency overrides installed by the client fixture
    from bloglist.main import app

    app.dependency_overrides.clear()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from bloglist.config import Settings, get_settings

    test_settings = Settings(
        environment="test",
        data_dir="",
        min_password_length=3,
        bcrypt_rounds=4,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("bloglist.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from bloglist.config import get_settings creates a local binding that
    # the bloglist.config monkeypatch above does not affect)
    for mod_path in [
        "bloglist.main",
        "bloglist.services.identity",
        "bloglist.services.security",
        "bloglist.services.storage",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def hasher():
    """Cheapest bcrypt cost so tests stay fast."""
    return BcryptHasher(rounds=4)


@pytest.fixture
def blog_store():
    return InMemoryStore("blogs")


@pytest.fixture
def user_store():
    return InMemoryStore("users", unique=("username",))


@pytest.fixture
async def seeded_blog_store(blog_store):
    for blog in INITIAL_BLOGS:
        await blog_store.insert(dict(blog))
    return blog_store


@pytest.fixture
async def seeded_user_store(user_store, hasher):
    """A user store holding only ``root`` (password ``sekret``)."""
    await user_store.insert(
        {"username": "root", "name": "Superuser", "password_hash": hasher.hash("sekret")}
    )
    return user_store


@pytest.fixture
async def client(mock_settings, seeded_blog_store, seeded_user_store, hasher):
    """HTTP client over the app with fresh stores injected."""
    from bloglist.main import app
    from bloglist.services.security import get_password_hasher
    from bloglist.services.storage import get_blog_store, get_user_store

    app.dependency_overrides[get_blog_store] = lambda: seeded_blog_store
    app.dependency_overrides[get_user_store] = lambda: seeded_user_store
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
