from sqlalchemy import Column, Date, Time
from museum_api.models import Base


class MuseumDailyHours(Base):
    """One row per calendar day the museum is open. No row means closed."""

    __tablename__ = "museum_daily_hours"

    date = Column(Date, primary_key=True, unique=True, index=True)
    time_open = Column(Time, nullable=False)
    time_closed = Column(Time, nullable=False)
