import uuid

from sqlalchemy import Column, Integer, Date, DateTime, Numeric, ForeignKey, Uuid
from datetime import datetime, timezone
from museum_api.models import Base


class TicketPurchase(Base):
    __tablename__ = "ticket_purchases"

    purchase_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    visit_date = Column(Date, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    total_cost = Column(Numeric(10, 2), nullable=False)
    # NULL means general admission
    event_id = Column(
        Uuid,
        ForeignKey("special_events.event_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    purchase_date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
