from datetime import date, time
from typing import Optional

from museum_api.schemas.base import CamelSchema


class MuseumHoursCreateSchema(CamelSchema):
    date: date
    time_open: Optional[time] = None
    time_closed: Optional[time] = None


class MuseumHoursResponseSchema(CamelSchema):
    date: date
    time_open: time
    time_closed: time

    @classmethod
    def from_hours(cls, hours) -> "MuseumHoursResponseSchema":
        return cls(date=hours.date, time_open=hours.time_open, time_closed=hours.time_closed)
