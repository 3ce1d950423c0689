from datetime import date, datetime
from typing import Optional
from uuid import UUID

from museum_api.schemas.base import CamelSchema, Money


class TicketPurchaseRequestSchema(CamelSchema):
    visit_date: date
    # range is checked by the purchase workflow so the failure carries its message
    quantity: int
    event_id: Optional[UUID] = None


class TicketPurchaseResponseSchema(CamelSchema):
    purchase_id: UUID
    visit_date: date
    quantity: int
    total_cost: Money
    event_id: Optional[UUID] = None
    event_name: Optional[str] = None
    purchase_date: datetime

    @classmethod
    def from_result(cls, result) -> "TicketPurchaseResponseSchema":
        purchase = result.purchase
        return cls(
            purchase_id=purchase.purchase_id,
            visit_date=purchase.visit_date,
            quantity=purchase.quantity,
            total_cost=purchase.total_cost,
            event_id=purchase.event_id,
            event_name=result.event_name,
            purchase_date=purchase.purchase_date,
        )
