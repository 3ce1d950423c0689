import uuid

from sqlalchemy import Column, String, Date, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from museum_api.models import Base


class SpecialEvent(Base):
    __tablename__ = "special_events"

    event_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    event_name = Column(String(200), nullable=False)
    event_description = Column(String(1000), nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)

    event_dates = relationship(
        "SpecialEventDate",
        back_populates="special_event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SpecialEventDate.date",
    )

    @property
    def dates(self) -> list:
        return sorted({event_date.date for event_date in self.event_dates})


class SpecialEventDate(Base):
    __tablename__ = "special_event_dates"

    # the composite key is what stops an event being scheduled twice on one day
    event_id = Column(
        Uuid,
        ForeignKey("special_events.event_id", ondelete="CASCADE"),
        primary_key=True,
    )
    date = Column(Date, primary_key=True, index=True)

    special_event = relationship("SpecialEvent", back_populates="event_dates")
