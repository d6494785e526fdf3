import os
import random
from datetime import date

# Configure before any trippulse import so the module-level engine and settings pick it up
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("MOCK_DELAY_MIN_MS", "0")
os.environ.setdefault("MOCK_DELAY_MAX_MS", "0")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import trippulse.models  # noqa: F401
from trippulse.database import Base, get_db
from trippulse.dependencies import get_search_orchestrator
from trippulse.main import app
from trippulse.models.trip import TripRequest
from trippulse.services.flight_service import FlightService
from trippulse.services.offer_synthesizer import TripParameters
from trippulse.services.search_orchestrator import SearchOrchestrator


class FakeRateLimiter:
    """Allows or denies every key according to `allowed`; records what it saw."""

    def __init__(self, allowed: bool = True):
        self.allowed = allowed
        self.keys: list[str] = []

    def allow(self, key: str) -> bool:
        self.keys.append(key)
        return self.allowed


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def rate_limiter():
    return FakeRateLimiter(allowed=True)


@pytest.fixture
def flight_service():
    return FlightService(rng=random.Random(42), delay_min_ms=0, delay_max_ms=0)


@pytest.fixture
def orchestrator(flight_service, rate_limiter):
    return SearchOrchestrator(flight_service=flight_service, rate_limiter=rate_limiter)


@pytest_asyncio.fixture
async def client(session_factory, orchestrator):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_search_orchestrator] = lambda: orchestrator
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_params():
    def _make(**overrides) -> TripParameters:
        data = {
            "origin": "FCO",
            "destination": "BCN",
            "departure_date": date(2026, 4, 1),
            "return_date": date(2026, 4, 8),
            "travelers": 2,
            "currency": "EUR",
        }
        data.update(overrides)
        return TripParameters(**data)

    return _make


@pytest_asyncio.fixture
async def trip(db):
    trip = TripRequest(
        origin="FCO",
        origin_city="Rome",
        destination="BCN",
        destination_city="Barcelona",
        departure_date=date(2026, 4, 1),
        return_date=date(2026, 4, 8),
        travelers=2,
        currency="EUR",
        status="draft",
    )
    db.add(trip)
    await db.commit()
    return trip
