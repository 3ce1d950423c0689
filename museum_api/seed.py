"""Demo data for a fresh database.

Thirty days of hours starting today (closed Mondays, shorter weekend hours)
and four special events with recurring dates. Nothing is written when the
tables already hold data.
"""

from datetime import date, time, timedelta
from decimal import Decimal
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from museum_api.models import MuseumDailyHours, SpecialEvent, SpecialEventDate

logger = logging.getLogger(__name__)

MONDAY, FRIDAY, SATURDAY, SUNDAY = 0, 4, 5, 6
WEEKEND = (SATURDAY, SUNDAY)

SEED_EVENTS = [
    (
        "Ancient Egypt: Treasures of the Pharaohs",
        "Explore artifacts from ancient Egyptian civilization, including mummies, hieroglyphics, and golden treasures.",
        Decimal("15.00"),
        21,
        lambda day: day.weekday() in WEEKEND,
    ),
    (
        "Dinosaurs: Giants of the Past",
        "Life-sized dinosaur replicas and fossils from the Mesozoic Era. Perfect for families and dinosaur enthusiasts.",
        Decimal("12.50"),
        14,
        lambda day: day.weekday() != MONDAY,
    ),
    (
        "Renaissance Masters",
        "A curated collection of paintings and sculptures from the Italian Renaissance.",
        Decimal("18.00"),
        28,
        lambda day: day.weekday() in (FRIDAY, SATURDAY, SUNDAY),
    ),
    (
        "Space Exploration: Journey to the Stars",
        "Interactive exhibits on space missions, astronauts, and the future of space travel.",
        Decimal("10.00"),
        30,
        lambda day: day.weekday() in (1, 3),
    ),
]


def seed_hours(start: date, days: int = 30) -> list[MuseumDailyHours]:
    hours = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        if day.weekday() == MONDAY:
            continue
        if day.weekday() in WEEKEND:
            hours.append(MuseumDailyHours(date=day, time_open=time(10, 0), time_closed=time(16, 0)))
        else:
            hours.append(MuseumDailyHours(date=day, time_open=time(9, 0), time_closed=time(17, 0)))
    return hours


def seed_events(start: date) -> list[SpecialEvent]:
    events = []
    for name, description, price, span, runs_on in SEED_EVENTS:
        event = SpecialEvent(event_name=name, event_description=description, price=price)
        event.event_dates = [
            SpecialEventDate(date=start + timedelta(days=offset))
            for offset in range(span)
            if runs_on(start + timedelta(days=offset))
        ]
        events.append(event)
    return events


async def seed_database(db: AsyncSession, today: date | None = None) -> None:
    today = today or date.today()

    hours_count = await db.scalar(select(func.count()).select_from(MuseumDailyHours))
    if not hours_count:
        hours = seed_hours(today)
        db.add_all(hours)
        logger.info(f"Seeding {len(hours)} days of museum hours from {today}.")

    events_count = await db.scalar(select(func.count()).select_from(SpecialEvent))
    if not events_count:
        events = seed_events(today)
        db.add_all(events)
        logger.info(f"Seeding {len(events)} special events.")

    await db.commit()
