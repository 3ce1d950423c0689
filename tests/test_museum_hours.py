"""Tests for museum hours queries and creation.

Run with: pytest tests/test_museum_hours.py -v
"""

import asyncio
from datetime import date, time

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from museum_api.database import create_engine_for_url
from museum_api.errors import ConflictError, ValidationError
from museum_api.models import Base, MuseumDailyHours
from museum_api.services import museum_hours as hours_service
from tests.conftest import CLOSED_DAY, OPEN_DAY


class TestHoursService:
    """Tests for the schedule store functions."""

    async def test_get_hours_for_closed_date_returns_none(self, db):
        """A date without a record means closed, not an error."""
        assert await hours_service.get_hours_for_date(db, CLOSED_DAY) is None

    async def test_range_is_inclusive_and_ascending(self, db, add_hours):
        for day in (date(2025, 10, 22), date(2025, 10, 20), date(2025, 10, 21), date(2025, 10, 25)):
            await add_hours(day)

        hours = await hours_service.get_hours_for_range(db, date(2025, 10, 20), date(2025, 10, 22))

        assert [h.date for h in hours] == [date(2025, 10, 20), date(2025, 10, 21), date(2025, 10, 22)]

    async def test_create_hours_twice_for_same_date_conflicts(self, db):
        """Second creation for a date fails and the original record is unchanged."""
        await hours_service.create_hours(db, OPEN_DAY, time(9, 0), time(17, 0))

        with pytest.raises(ConflictError):
            await hours_service.create_hours(db, OPEN_DAY, time(10, 0), time(18, 0))

        hours = await hours_service.get_hours_for_date(db, OPEN_DAY)
        assert (hours.time_open, hours.time_closed) == (time(9, 0), time(17, 0))

    async def test_create_hours_requires_both_times(self, db):
        with pytest.raises(ValidationError):
            await hours_service.create_hours(db, OPEN_DAY, time(9, 0), None)
        assert await hours_service.is_museum_open(db, OPEN_DAY) is False

    async def test_concurrent_creates_for_same_date_one_conflicts(self, tmp_path):
        engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'hours.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

        async def create():
            async with factory() as session:
                return await hours_service.create_hours(session, OPEN_DAY, time(9, 0), time(17, 0))

        try:
            results = await asyncio.gather(create(), create(), return_exceptions=True)
        finally:
            await engine.dispose()

        assert len([r for r in results if isinstance(r, ConflictError)]) == 1
        assert len([r for r in results if isinstance(r, MuseumDailyHours)]) == 1


class TestMuseumHoursEndpoint:
    """Tests for GET /v1/museumhours"""

    async def test_all_hours_ordered_by_date(self, client: AsyncClient, add_hours):
        await add_hours(date(2025, 10, 25), time(9, 0), time(20, 0))
        await add_hours(date(2025, 10, 20))

        response = await client.get("/v1/museumhours")

        assert response.status_code == 200
        assert response.json() == [
            {"date": "2025-10-20", "timeOpen": "09:00:00", "timeClosed": "17:00:00"},
            {"date": "2025-10-25", "timeOpen": "09:00:00", "timeClosed": "20:00:00"},
        ]

    async def test_single_date_closed_returns_empty_list(self, client: AsyncClient, add_hours):
        await add_hours(OPEN_DAY)

        response = await client.get("/v1/museumhours", params={"date": CLOSED_DAY.isoformat()})

        assert response.status_code == 200
        assert response.json() == []

    async def test_single_date_open(self, client: AsyncClient, add_hours):
        await add_hours(OPEN_DAY)

        response = await client.get("/v1/museumhours", params={"date": OPEN_DAY.isoformat()})

        assert [h["date"] for h in response.json()] == ["2025-10-20"]

    async def test_open_ended_range(self, client: AsyncClient, add_hours):
        await add_hours(date(2025, 10, 20))
        await add_hours(date(2025, 10, 21))

        response = await client.get("/v1/museumhours", params={"startDate": "2025-10-21"})

        assert [h["date"] for h in response.json()] == ["2025-10-21"]

    async def test_invalid_date_returns_400(self, client: AsyncClient):
        response = await client.get("/v1/museumhours", params={"date": "not-a-date"})

        assert response.status_code == 400
        assert "message" in response.json()


class TestAdminMuseumHoursEndpoint:
    """Tests for POST /v1/admin/museumhours"""

    async def test_create_hours(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/v1/admin/museumhours",
            json={"date": "2025-10-20", "timeOpen": "09:00", "timeClosed": "17:00"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["timeClosed"] == "17:00:00"

    async def test_duplicate_date_returns_400(self, client: AsyncClient, admin_headers, add_hours):
        await add_hours(OPEN_DAY)

        response = await client.post(
            "/v1/admin/museumhours",
            json={"date": "2025-10-20", "timeOpen": "10:00", "timeClosed": "18:00"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "CONFLICT"

    async def test_missing_close_time_returns_400(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/v1/admin/museumhours",
            json={"date": "2025-10-20", "timeOpen": "10:00"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_requires_admin(self, client: AsyncClient):
        response = await client.post(
            "/v1/admin/museumhours",
            json={"date": "2025-10-20", "timeOpen": "09:00", "timeClosed": "17:00"},
        )

        assert response.status_code == 401
