"""Special event catalog.

Every read goes through ``_event_query`` so the date collection is loaded
eagerly; callers build projections from ``SpecialEvent.dates``, which is
always sorted ascending.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from museum_api.errors import ConflictError, EventNotFoundError, ValidationError
from museum_api.models.special_event import SpecialEvent, SpecialEventDate

logger = logging.getLogger(__name__)


def _event_query():
    return (
        select(SpecialEvent)
        .options(selectinload(SpecialEvent.event_dates))
        .execution_options(populate_existing=True)
    )


def _validate_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("EventName is required")
    return name


def _validate_price(price: Decimal) -> Decimal:
    if price < 0:
        raise ValidationError("Price must be non-negative")
    return price


async def get_all_events(db: AsyncSession) -> List[SpecialEvent]:
    result = await db.execute(_event_query().order_by(SpecialEvent.event_name))
    return result.scalars().all()


async def get_event_by_id(db: AsyncSession, event_id: UUID) -> SpecialEvent | None:
    result = await db.execute(_event_query().where(SpecialEvent.event_id == event_id))
    event = result.scalars().first()
    if event is None:
        logger.info(f"Special event not found: {event_id}")
    return event


async def get_events_by_date(db: AsyncSession, day: date) -> List[SpecialEvent]:
    return await get_events_by_date_range(db, day, day)


async def get_events_by_date_range(db: AsyncSession, start: date, end: date) -> List[SpecialEvent]:
    query = _event_query().where(
        SpecialEvent.event_dates.any(
            (SpecialEventDate.date >= start) & (SpecialEventDate.date <= end)
        )
    )
    result = await db.execute(query.order_by(SpecialEvent.event_name))
    events = result.scalars().all()
    logger.info(f"Found {len(events)} special events between {start} and {end}.")
    return events


async def is_event_scheduled(db: AsyncSession, event_id: UUID, day: date) -> bool:
    result = await db.execute(
        select(SpecialEventDate.event_id).where(
            SpecialEventDate.event_id == event_id,
            SpecialEventDate.date == day,
        )
    )
    return result.first() is not None


async def _require_event(db: AsyncSession, event_id: UUID) -> SpecialEvent:
    event = await get_event_by_id(db, event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return event


async def _commit_or_conflict(db: AsyncSession, conflict_message: str) -> None:
    try:
        await db.commit()
    except IntegrityError as e_integrity:
        await db.rollback()
        logger.warning(f"IntegrityError: {conflict_message}: {str(e_integrity)}")
        raise ConflictError(conflict_message)


async def create_event(
    db: AsyncSession,
    name: str,
    description: Optional[str],
    price: Decimal,
    initial_dates: Optional[Iterable[date]] = None,
) -> SpecialEvent:
    name = _validate_name(name)
    price = _validate_price(price)
    dates = sorted(set(initial_dates or ()))

    db_event = SpecialEvent(
        event_name=name,
        event_description=(description or "").strip(),
        price=price,
    )
    db_event.event_dates = [SpecialEventDate(date=day) for day in dates]
    db.add(db_event)
    await _commit_or_conflict(db, f"Could not create special event '{name}'")
    logger.info(f"Special event '{name}' created (ID: {db_event.event_id}) with {len(dates)} dates.")
    return await _require_event(db, db_event.event_id)


async def update_event(
    db: AsyncSession,
    event_id: UUID,
    name: Optional[str] = None,
    description: Optional[str] = None,
    price: Optional[Decimal] = None,
    replace_dates: Optional[Iterable[date]] = None,
) -> SpecialEvent:
    if name is not None:
        name = _validate_name(name)
    if price is not None:
        price = _validate_price(price)

    db_event = await _require_event(db, event_id)

    if name is not None:
        db_event.event_name = name
    if description is not None:
        db_event.event_description = description.strip()
    if price is not None:
        db_event.price = price

    if replace_dates is not None:
        dates = sorted(set(replace_dates))
        # delete-all then insert-all inside the same transaction
        db_event.event_dates.clear()
        await db.flush()
        db_event.event_dates.extend(SpecialEventDate(date=day) for day in dates)

    await _commit_or_conflict(db, f"Could not update special event {event_id}")
    logger.info(f"Special event {event_id} updated.")
    return await _require_event(db, event_id)


async def delete_event(db: AsyncSession, event_id: UUID) -> None:
    db_event = await _require_event(db, event_id)
    event_name = db_event.event_name
    await db.delete(db_event)
    await db.commit()
    logger.info(f"Special event '{event_name}' (ID: {event_id}) deleted.")


async def add_event_date(db: AsyncSession, event_id: UUID, day: date) -> SpecialEvent:
    db_event = await _require_event(db, event_id)
    conflict_message = f"Date {day.isoformat()} already exists for event {event_id}"
    if day in db_event.dates:
        raise ConflictError(conflict_message)

    db.add(SpecialEventDate(event_id=event_id, date=day))
    await _commit_or_conflict(db, conflict_message)
    logger.info(f"Date {day} added to special event {event_id}.")
    return await _require_event(db, event_id)


async def remove_event_date(db: AsyncSession, event_id: UUID, day: date) -> SpecialEvent:
    db_event = await _require_event(db, event_id)
    existing = next((ed for ed in db_event.event_dates if ed.date == day), None)
    if existing is None:
        raise ConflictError(f"Date {day.isoformat()} does not exist for event {event_id}")

    await db.delete(existing)
    await db.commit()
    logger.info(f"Date {day} removed from special event {event_id}.")
    return await _require_event(db, event_id)
