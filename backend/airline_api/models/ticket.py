from sqlalchemy import String, Integer, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
import enum

from airline_api.models.base import Base


class TicketStatus(str, enum.Enum):
    booked = "booked"
    cancelled = "cancelled"


SEAT_UNIQUE_CONSTRAINT = "uq_tickets_flight_seat"


class Ticket(Base):
    __tablename__ = "tickets"
    # A seat is taken once per flight instance, cancelled tickets included
    __table_args__ = (
        UniqueConstraint("aircraft_number", "departure_time", "seat", name=SEAT_UNIQUE_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    passport_id: Mapped[str] = mapped_column(String(64), index=True)
    source_airport: Mapped[int] = mapped_column(ForeignKey("airports.id", ondelete="CASCADE"))
    destination_airport: Mapped[int] = mapped_column(ForeignKey("airports.id", ondelete="CASCADE"))
    departure_time: Mapped[datetime] = mapped_column(DateTime)
    aircraft_number: Mapped[str] = mapped_column(String(32), index=True)
    seat: Mapped[str] = mapped_column(String(3))
    status: Mapped[str] = mapped_column(String(16), default=TicketStatus.booked.value)  # booked | cancelled
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    @property
    def is_cancelled(self) -> bool:
        return self.status == TicketStatus.cancelled.value
