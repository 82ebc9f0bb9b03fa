"""Ticket booking, cancellation and seat reassignment.

Seat uniqueness per flight instance is guarded by a unique constraint on
``(aircraft_number, departure_time, seat)``. Reading the occupied seats and
inserting is not atomic, so two requests can pick the same seat; the loser
gets an IntegrityError, rolls back and draws again.
"""
from datetime import datetime, timezone
from typing import Callable, AbstractSet
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from airline_api.core.config import settings
from airline_api.core.errors import InvalidAirportCode, InvalidState, NotFound, SeatConflict, ValidationError
from airline_api.models.ticket import SEAT_UNIQUE_CONSTRAINT, Ticket, TicketStatus
from airline_api.services import seat_allocator
from airline_api.services.airport_directory import AirportDirectory

logger = logging.getLogger(__name__)

SeatAllocator = Callable[[AbstractSet[str]], str]


def as_naive_utc(value: datetime) -> datetime:
    """Store departure times as naive UTC so one instant is one flight instance."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _is_seat_collision(exc: IntegrityError) -> bool:
    msg = str(exc.orig)
    # Postgres names the constraint, SQLite lists the columns
    return SEAT_UNIQUE_CONSTRAINT in msg or "tickets.seat" in msg


class TicketService:
    def __init__(
        self,
        db: Session,
        airports: AirportDirectory | None = None,
        allocator: SeatAllocator = seat_allocator.allocate,
        max_attempts: int | None = None,
    ):
        self.db = db
        self.airports = airports or AirportDirectory(db)
        self.allocator = allocator
        self.max_attempts = max_attempts or settings.seat_allocation_attempts

    def list_tickets(self) -> list[Ticket]:
        return list(self.db.scalars(select(Ticket).order_by(Ticket.id)))

    def get_ticket(self, ticket_id: int) -> Ticket:
        ticket = self.db.get(Ticket, ticket_id)
        if ticket is None:
            raise NotFound("Ticket not found")
        return ticket

    def occupied_seats(self, aircraft_number: str, departure_time: datetime) -> set[str]:
        """Seats held on a flight instance, cancelled tickets included."""
        rows = self.db.scalars(
            select(Ticket.seat).where(
                Ticket.aircraft_number == aircraft_number,
                Ticket.departure_time == departure_time,
            )
        )
        return set(rows)

    def book(
        self,
        passport_id: str,
        source_code: str,
        destination_code: str,
        departure_time: datetime,
        aircraft_number: str,
    ) -> Ticket:
        for field, value in (
            ("passport_id", passport_id),
            ("source_airport", source_code),
            ("destination_airport", destination_code),
            ("aircraft_number", aircraft_number),
        ):
            if not value or not str(value).strip():
                raise ValidationError(f"The {field} field is required.")
        if departure_time is None:
            raise ValidationError("The departure_time field is required.")
        if source_code == destination_code:
            raise ValidationError("The destination airport and source airport must be different.")

        source_id = self.airports.resolve_code(source_code)
        destination_id = self.airports.resolve_code(destination_code)
        if source_id is None or destination_id is None:
            raise InvalidAirportCode()

        departure_time = as_naive_utc(departure_time)
        for attempt in range(1, self.max_attempts + 1):
            seat = self.allocator(self.occupied_seats(aircraft_number, departure_time))
            ticket = Ticket(
                passport_id=passport_id,
                source_airport=source_id,
                destination_airport=destination_id,
                departure_time=departure_time,
                aircraft_number=aircraft_number,
                seat=seat,
                status=TicketStatus.booked.value,
            )
            self.db.add(ticket)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                if not _is_seat_collision(exc):
                    raise
                logger.warning(
                    "Seat %s on %s at %s taken concurrently (attempt %d/%d)",
                    seat, aircraft_number, departure_time.isoformat(), attempt, self.max_attempts,
                )
                continue
            self.db.refresh(ticket)
            logger.info(
                "Booked ticket id=%s seat=%s on %s %s->%s at %s",
                ticket.id, ticket.seat, aircraft_number, source_code, destination_code, departure_time.isoformat(),
            )
            return ticket
        raise SeatConflict()

    def cancel(self, ticket_id: int) -> Ticket:
        ticket = self.get_ticket(ticket_id)
        if ticket.is_cancelled:
            return ticket
        ticket.status = TicketStatus.cancelled.value
        self.db.commit()
        self.db.refresh(ticket)
        logger.info("Cancelled ticket id=%s (seat %s stays reserved)", ticket.id, ticket.seat)
        return ticket

    def change_seat(self, ticket_id: int) -> Ticket:
        ticket = self.get_ticket(ticket_id)
        if ticket.is_cancelled:
            raise InvalidState("Cannot change seat of a cancelled ticket")

        for attempt in range(1, self.max_attempts + 1):
            old_seat = ticket.seat
            # the ticket's own seat is not something it has to avoid
            occupied = self.occupied_seats(ticket.aircraft_number, ticket.departure_time) - {old_seat}
            ticket.seat = self.allocator(occupied)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                if not _is_seat_collision(exc):
                    raise
                logger.warning(
                    "Seat change for ticket id=%s collided (attempt %d/%d)",
                    ticket_id, attempt, self.max_attempts,
                )
                continue
            self.db.refresh(ticket)
            logger.info("Ticket id=%s moved from seat %s to %s", ticket.id, old_seat, ticket.seat)
            return ticket
        raise SeatConflict()
