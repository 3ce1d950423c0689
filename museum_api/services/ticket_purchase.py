"""Ticket purchase workflow.

A purchase is validated completely before anything is written: quantity,
then either the museum's hours (general admission) or the event and its
schedule (event ticket). Only then is a single ``TicketPurchase`` row
inserted, so a failed purchase never leaves partial state behind.

The unit price of an event ticket is the event's price at the moment of
purchase, not the price it had when the date was scheduled.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from museum_api.config import settings
from museum_api.errors import BusinessRuleViolation, PurchaseNotFoundError, ValidationError
from museum_api.models.special_event import SpecialEvent
from museum_api.models.ticket_purchase import TicketPurchase
from museum_api.services.museum_hours import is_museum_open
from museum_api.services.special_events import is_event_scheduled

logger = logging.getLogger(__name__)

MAX_QUANTITY = 2_147_483_647
# largest value a NUMERIC(10,2) column holds
MAX_TOTAL_COST = Decimal("99999999.99")


@dataclass(frozen=True)
class PurchaseResult:
    purchase: TicketPurchase
    event_name: Optional[str] = None


def calculate_total_cost(unit_price: Decimal, quantity: int) -> Decimal:
    return Decimal(unit_price) * quantity


async def _general_admission_price(db: AsyncSession, visit_date: date) -> Decimal:
    if not await is_museum_open(db, visit_date):
        raise BusinessRuleViolation(f"Museum is closed on {visit_date.isoformat()}")
    return settings.GENERAL_ADMISSION_PRICE


async def _event_price(db: AsyncSession, event_id: UUID, visit_date: date) -> tuple[Decimal, str]:
    event = await db.get(SpecialEvent, event_id)
    if event is None:
        raise BusinessRuleViolation(f"Event not found: {event_id}")
    if not await is_event_scheduled(db, event_id, visit_date):
        raise BusinessRuleViolation(
            f"Event {event.event_name} is not scheduled on {visit_date.isoformat()}"
        )
    return event.price, event.event_name


async def purchase_tickets(
    db: AsyncSession,
    visit_date: date,
    quantity: int,
    event_id: Optional[UUID] = None,
) -> PurchaseResult:
    logger.info(f"Processing purchase for {visit_date}, quantity {quantity}, event_id {event_id}.")

    if quantity < 1:
        raise ValidationError("Quantity must be positive")
    if quantity > MAX_QUANTITY:
        raise ValidationError(f"Quantity must not exceed {MAX_QUANTITY}")

    event_name = None
    if event_id is None:
        unit_price = await _general_admission_price(db, visit_date)
    else:
        unit_price, event_name = await _event_price(db, event_id, visit_date)

    total_cost = calculate_total_cost(unit_price, quantity)
    if total_cost > MAX_TOTAL_COST:
        raise ValidationError(f"Total cost {total_cost} exceeds the maximum of {MAX_TOTAL_COST}")

    purchase = TicketPurchase(
        purchase_id=uuid4(),
        visit_date=visit_date,
        quantity=quantity,
        total_cost=total_cost,
        event_id=event_id,
        purchase_date=datetime.now(timezone.utc),
    )
    db.add(purchase)
    await db.commit()
    logger.info(f"Purchase {purchase.purchase_id} completed: total {purchase.total_cost}.")
    return PurchaseResult(purchase=purchase, event_name=event_name)


async def get_purchase(db: AsyncSession, purchase_id: UUID) -> PurchaseResult:
    purchase = await db.get(TicketPurchase, purchase_id)
    if purchase is None:
        raise PurchaseNotFoundError(purchase_id)
    event_name = None
    if purchase.event_id is not None:
        event = await db.get(SpecialEvent, purchase.event_id)
        event_name = event.event_name if event else None
    return PurchaseResult(purchase=purchase, event_name=event_name)
