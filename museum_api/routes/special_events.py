from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from datetime import date
from uuid import UUID
import logging

from museum_api.auth.dependencies import get_current_admin
from museum_api.database import get_db
from museum_api.errors import DomainError, EventNotFoundError
from museum_api.schemas.special_event import (
    SpecialEventCreateSchema,
    SpecialEventUpdateSchema,
    SpecialEventDateAddSchema,
    SpecialEventResponseSchema
)
from museum_api.services import special_events as events_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/specialevents",
    tags=["Special Events"]
)

admin_router = APIRouter(
    prefix="/v1/admin/specialevents",
    tags=["Admin Special Events"],
    dependencies=[Depends(get_current_admin)]
)


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Unexpected error {action}: {str(e)}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred."
    )


@router.get(
    "",
    response_model=List[SpecialEventResponseSchema],
    summary="Get special events, optionally filtered by date or date range (Public)"
)
async def get_special_events(
    db: AsyncSession = Depends(get_db),
    day: Optional[date] = Query(default=None, alias="date"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
):
    try:
        if day is not None:
            events = await events_service.get_events_by_date(db, day)
        elif start_date is not None or end_date is not None:
            events = await events_service.get_events_by_date_range(
                db, start_date or date.min, end_date or date.max
            )
        else:
            events = await events_service.get_all_events(db)
    except Exception as e:
        raise _unexpected("fetching special events", e)
    return [SpecialEventResponseSchema.from_event(event) for event in events]


@router.get(
    "/{event_id}",
    response_model=SpecialEventResponseSchema,
    summary="Get a special event by ID with all scheduled dates (Public)"
)
async def get_special_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    try:
        event = await events_service.get_event_by_id(db, event_id)
    except Exception as e:
        raise _unexpected(f"fetching special event {event_id}", e)
    if event is None:
        raise EventNotFoundError(event_id)
    return SpecialEventResponseSchema.from_event(event)


@admin_router.post(
    "",
    response_model=SpecialEventResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Admin: Create a special event"
)
async def create_special_event(
    event_data: SpecialEventCreateSchema,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    try:
        event = await events_service.create_event(
            db,
            event_data.event_name,
            event_data.event_description,
            event_data.price,
            event_data.initial_dates,
        )
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        raise _unexpected(f"creating special event '{event_data.event_name}'", e_general)
    response.headers["Location"] = f"/v1/admin/specialevents/{event.event_id}"
    return SpecialEventResponseSchema.from_event(event)


@admin_router.put(
    "/{event_id}",
    response_model=SpecialEventResponseSchema,
    summary="Admin: Update a special event (partial, optional date replacement)"
)
async def update_special_event(
    event_id: UUID,
    event_update_data: SpecialEventUpdateSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        event = await events_service.update_event(
            db,
            event_id,
            name=event_update_data.event_name,
            description=event_update_data.event_description,
            price=event_update_data.price,
            replace_dates=event_update_data.replace_dates,
        )
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        raise _unexpected(
            f"updating special event {event_id} with payload "
            f"{event_update_data.model_dump_json(exclude_unset=True)}",
            e_general
        )
    return SpecialEventResponseSchema.from_event(event)


@admin_router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Admin: Delete a special event and all its dates"
)
async def delete_special_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    try:
        await events_service.delete_event(db, event_id)
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        raise _unexpected(f"deleting special event {event_id}", e_general)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.post(
    "/{event_id}/dates",
    response_model=SpecialEventResponseSchema,
    summary="Admin: Add a date to a special event"
)
async def add_special_event_date(
    event_id: UUID,
    date_data: SpecialEventDateAddSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        event = await events_service.add_event_date(db, event_id, date_data.date)
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        raise _unexpected(f"adding date {date_data.date} to special event {event_id}", e_general)
    return SpecialEventResponseSchema.from_event(event)


@admin_router.delete(
    "/{event_id}/dates/{day}",
    response_model=SpecialEventResponseSchema,
    summary="Admin: Remove a date from a special event"
)
async def remove_special_event_date(
    event_id: UUID,
    day: date,
    db: AsyncSession = Depends(get_db)
):
    try:
        event = await events_service.remove_event_date(db, event_id, day)
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        raise _unexpected(f"removing date {day} from special event {event_id}", e_general)
    return SpecialEventResponseSchema.from_event(event)
