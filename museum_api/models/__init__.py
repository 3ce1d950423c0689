from sqlalchemy.orm import declarative_base

Base = declarative_base()

from museum_api.models.museum_hours import MuseumDailyHours  # noqa: E402
from museum_api.models.special_event import SpecialEvent, SpecialEventDate  # noqa: E402
from museum_api.models.ticket_purchase import TicketPurchase  # noqa: E402

__all__ = [
    "Base",
    "MuseumDailyHours",
    "SpecialEvent",
    "SpecialEventDate",
    "TicketPurchase",
]
