"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base, init_db
from tracker.app.models.parcel import ParcelRecord  # noqa: F401
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel
from tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture
def test_engine():
    return engine


@pytest.fixture
def session_factory():
    return TestingSessionLocal


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test function and drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db_session():
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def rng():
    """Test-local random source for synthetic client ids."""
    return random.Random()


@pytest.fixture
def make_parcel():
    """Factory for a fresh registered test parcel."""
    def _make(**overrides):
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": "2024-01-01T00:00:00Z",
        }
        fields.update(overrides)
        return Parcel(**fields)
    return _make


@pytest.fixture
async def file_sessions(tmp_path):
    """Session factory over a database file, for tests spanning several connections."""
    file_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}")
    await init_db(file_engine)
    
    yield async_sessionmaker(file_engine, class_=AsyncSession, expire_on_commit=False)
    
    await file_engine.dispose()
