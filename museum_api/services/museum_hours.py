from datetime import date, time
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from museum_api.errors import ConflictError, ValidationError
from museum_api.models.museum_hours import MuseumDailyHours

logger = logging.getLogger(__name__)


async def get_hours_for_date(db: AsyncSession, day: date) -> MuseumDailyHours | None:
    hours = await db.get(MuseumDailyHours, day)
    if hours is None:
        logger.info(f"No hours found for {day}: museum is closed.")
    return hours


async def get_hours_for_range(db: AsyncSession, start: date, end: date) -> List[MuseumDailyHours]:
    result = await db.execute(
        select(MuseumDailyHours)
        .where(MuseumDailyHours.date >= start, MuseumDailyHours.date <= end)
        .order_by(MuseumDailyHours.date)
    )
    hours = result.scalars().all()
    logger.info(f"Found {len(hours)} open days between {start} and {end}.")
    return hours


async def get_all_hours(db: AsyncSession) -> List[MuseumDailyHours]:
    result = await db.execute(select(MuseumDailyHours).order_by(MuseumDailyHours.date))
    return result.scalars().all()


async def is_museum_open(db: AsyncSession, day: date) -> bool:
    result = await db.execute(select(MuseumDailyHours.date).where(MuseumDailyHours.date == day))
    return result.first() is not None


async def create_hours(
    db: AsyncSession,
    day: date,
    time_open: Optional[time],
    time_closed: Optional[time],
) -> MuseumDailyHours:
    if time_open is None or time_closed is None:
        raise ValidationError("Both opening and closing times are required")

    if await is_museum_open(db, day):
        raise ConflictError(f"Museum hours already exist for {day.isoformat()}")

    db_hours = MuseumDailyHours(date=day, time_open=time_open, time_closed=time_closed)
    db.add(db_hours)
    try:
        await db.commit()
    except IntegrityError as e_integrity:
        # a concurrent request created the same day between the check and the insert
        await db.rollback()
        logger.warning(f"IntegrityError creating hours for {day}: {str(e_integrity)}")
        raise ConflictError(f"Museum hours already exist for {day.isoformat()}")
    logger.info(f"Museum hours created for {day}: {time_open}-{time_closed}.")
    return db_hours
