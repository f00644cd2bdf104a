"""
Dog House API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_store:      AsyncMock standing in for doghouse_api.store.Store
    ├── make_dog_house:  factory for transient DogHouse rows
    ├── make_review:     factory for transient Review rows
    ├── session_factory: async sessions on a fresh SQLite database
    ├── seeded:          the reference data set (dog houses 1, 2; reviews 10, 11, 12)
    └── test_client:     HTTPX AsyncClient bound to the app, using session_factory
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any doghouse_api import so `settings` and the module
# engine point at a throwaway SQLite file.
_test_dir = tempfile.mkdtemp(prefix="doghouse_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/app.db"
os.environ["LOG_LEVEL"] = "WARNING"

from doghouse_api.database import Base, get_db_session  # noqa: E402
from doghouse_api.models import DogHouse, Review  # noqa: E402

FIXED_TIME = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock Store.

    Usage:
        mock_store.find.return_value = make_dog_house(id=1)
        result = await dog_house_service.show(mock_store, "1")
    """
    store = AsyncMock()
    store.find = AsyncMock(return_value=None)
    store.find_all = AsyncMock(return_value=[])
    store.find_all_where = AsyncMock(return_value=[])
    store.find_many = AsyncMock(return_value={})
    store.create = AsyncMock()
    return store


@pytest.fixture
def make_dog_house():
    def factory(**overrides):
        fields = {
            "id": 1,
            "name": "Cozy Kennel",
            "address": "12 Bark Street",
            "description": "Insulated cedar house.",
            "created_at": FIXED_TIME,
            "updated_at": FIXED_TIME,
        }
        fields.update(overrides)
        return DogHouse(**fields)
    return factory


@pytest.fixture
def make_review():
    def factory(**overrides):
        fields = {
            "id": 10,
            "username": "rover",
            "comment": "Warm all winter.",
            "rating": 5,
            "dog_house_id": 1,
            "created_at": FIXED_TIME,
            "updated_at": FIXED_TIME,
        }
        fields.update(overrides)
        return Review(**fields)
    return factory


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A session factory on a fresh SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded(session_factory):
    """
    Reference data set:
        dog house 1 ← reviews 10, 11
        dog house 2 ← review 12
    """
    async with session_factory() as session:
        session.add_all([
            DogHouse(id=1, name="Cozy Kennel", address="12 Bark Street"),
            DogHouse(id=2, name="Doggie Condo", address="7 Fetch Avenue"),
        ])
        await session.flush()
        session.add_all([
            Review(id=10, username="rover", comment="Warm all winter.", rating=5, dog_house_id=1),
            Review(id=11, username="spot", comment="Porch is small.", rating=4, dog_house_id=1),
            Review(id=12, username="fido", comment="Love the ramp.", rating=5, dog_house_id=2),
        ])
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def test_client(seeded):
    """
    HTTPX AsyncClient talking to the app through ASGITransport, with the
    request session dependency pointed at the seeded database.
    """
    from doghouse_api.main import app

    async def override_get_db_session():
        async with seeded() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
