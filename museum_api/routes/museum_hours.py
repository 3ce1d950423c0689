from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from datetime import date
import logging

from museum_api.auth.dependencies import get_current_admin
from museum_api.database import get_db
from museum_api.errors import DomainError
from museum_api.schemas.museum_hours import MuseumHoursCreateSchema, MuseumHoursResponseSchema
from museum_api.services import museum_hours as hours_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/museumhours",
    tags=["Museum Hours"]
)

admin_router = APIRouter(
    prefix="/v1/admin/museumhours",
    tags=["Admin Museum Hours"],
    dependencies=[Depends(get_current_admin)]
)


@router.get(
    "",
    response_model=List[MuseumHoursResponseSchema],
    summary="Get museum operating hours for a date, a date range, or all dates (Public)"
)
async def get_museum_hours(
    db: AsyncSession = Depends(get_db),
    day: Optional[date] = Query(default=None, alias="date"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
):
    try:
        if day is not None:
            hours = await hours_service.get_hours_for_date(db, day)
            hours_list = [hours] if hours is not None else []
        elif start_date is not None or end_date is not None:
            hours_list = await hours_service.get_hours_for_range(
                db, start_date or date.min, end_date or date.max
            )
        else:
            hours_list = await hours_service.get_all_hours(db)
    except Exception as e:
        logger.error(f"Error fetching museum hours: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching museum hours."
        )
    return [MuseumHoursResponseSchema.from_hours(hours) for hours in hours_list]


@admin_router.post(
    "",
    response_model=MuseumHoursResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Admin: Record the museum as open on a date"
)
async def create_museum_hours(
    hours_data: MuseumHoursCreateSchema,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    try:
        hours = await hours_service.create_hours(
            db, hours_data.date, hours_data.time_open, hours_data.time_closed
        )
    except DomainError:
        raise
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error creating museum hours {hours_data.model_dump_json()}: {str(e_general)}",
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while creating museum hours."
        )
    response.headers["Location"] = f"/v1/museumhours?date={hours.date.isoformat()}"
    return MuseumHoursResponseSchema.from_hours(hours)
