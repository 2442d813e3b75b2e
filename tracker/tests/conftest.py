"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base
from tracker.app.models.parcel import Parcel  # noqa: F401  (registers the table)
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel as ParcelSchema, utc_timestamp
from tracker.app.store.parcel_store import ParcelStore
from tracker.app.services.parcel_service import ParcelService

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# One seed per test run keeps generated client ids reproducible
RANDOM_SEED = 20240101


@pytest.fixture
async def engine():
    """Create tables before each test function and drop after."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield test_engine
    
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine):
    TestingSessionLocal = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture(scope="session")
def rng():
    return random.Random(RANDOM_SEED)


def make_test_parcel(**overrides) -> ParcelSchema:
    """Return a fresh, not-yet-stored test parcel."""
    fields = {
        "client": 1000,
        "status": ParcelStatus.REGISTERED,
        "address": "test",
        "created_at": utc_timestamp(),
    }
    fields.update(overrides)
    return ParcelSchema(**fields)


@pytest.fixture
def make_parcel():
    return make_test_parcel
