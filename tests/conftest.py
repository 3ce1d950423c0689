"""Pytest configuration and shared fixtures."""

from datetime import date, time
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from museum_api.auth.security import ADMIN_ROLE, create_access_token
from museum_api.database import create_engine_for_url, get_db
from museum_api.main import app
from museum_api.models import Base, MuseumDailyHours, SpecialEvent, SpecialEventDate

OPEN_DAY = date(2025, 10, 20)
CLOSED_DAY = date(2030, 1, 1)


@pytest.fixture
async def engine():
    engine = create_engine_for_url(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as api_client:
        yield api_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token({"sub": "test-admin", "role": ADMIN_ROLE})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def add_hours(session_factory):
    async def _add_hours(day: date = OPEN_DAY, time_open: time = time(9, 0), time_closed: time = time(17, 0)):
        async with session_factory() as session:
            session.add(MuseumDailyHours(date=day, time_open=time_open, time_closed=time_closed))
            await session.commit()

    return _add_hours


@pytest.fixture
def add_event(session_factory):
    async def _add_event(
        name: str = "Concert Night",
        price: Decimal = Decimal("35.00"),
        dates: tuple = (OPEN_DAY,),
        description: str = "Live music in the main hall",
    ) -> SpecialEvent:
        async with session_factory() as session:
            event = SpecialEvent(event_name=name, event_description=description, price=price)
            event.event_dates = [SpecialEventDate(date=day) for day in dates]
            session.add(event)
            await session.commit()
            return event

    return _add_event
