from pydantic import Field
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from museum_api.schemas.base import CamelSchema, Money


class SpecialEventCreateSchema(CamelSchema):
    event_name: str = Field(..., max_length=200)
    event_description: str = Field(default="", max_length=1000)
    price: Decimal = Field(..., max_digits=10, decimal_places=2)
    initial_dates: Optional[List[date]] = None


class SpecialEventUpdateSchema(CamelSchema):
    """Only the fields present in the payload are changed.

    ``replace_dates`` swaps the whole date set when supplied, even as ``[]``.
    """

    event_name: Optional[str] = Field(default=None, max_length=200)
    event_description: Optional[str] = Field(default=None, max_length=1000)
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    replace_dates: Optional[List[date]] = None


class SpecialEventDateAddSchema(CamelSchema):
    date: date


class SpecialEventResponseSchema(CamelSchema):
    event_id: UUID
    event_name: str
    event_description: str
    price: Money
    event_dates: List[date]

    @classmethod
    def from_event(cls, event) -> "SpecialEventResponseSchema":
        return cls(
            event_id=event.event_id,
            event_name=event.event_name,
            event_description=event.event_description,
            price=event.price,
            event_dates=event.dates,
        )
