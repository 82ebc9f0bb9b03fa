from fastapi import APIRouter, Depends, status

from airline_api.api.deps import get_ticket_service
from airline_api.schemas.ticket import ErrorOut, TicketCancelled, TicketCreate, TicketOut, ValidationErrorOut
from airline_api.services.ticket_service import TicketService

router = APIRouter()

_not_found = {404: {"model": ErrorOut, "description": "Ticket not found"}}
_no_seat = {409: {"model": ErrorOut, "description": "No free seat could be reserved"}}

@router.get("", response_model=list[TicketOut], summary="Get all booked tickets")
@router.get("/", response_model=list[TicketOut], include_in_schema=False)
def list_tickets(service: TicketService = Depends(get_ticket_service)):
    return service.list_tickets()

@router.post(
    "",
    response_model=TicketOut,
    status_code=status.HTTP_201_CREATED,
    summary="Book a new ticket",
    responses={
        400: {"model": ErrorOut, "description": "Invalid airport code"},
        422: {"model": ValidationErrorOut, "description": "Validation error"},
        **_no_seat,
    },
)
@router.post("/", response_model=TicketOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_ticket(payload: TicketCreate, service: TicketService = Depends(get_ticket_service)):
    """Book a seat on a flight instance (aircraft number + departure time).

    Airports are given by code; the stored ticket references airport ids.
    The seat is picked at random among the ones still free on that flight.
    """
    return service.book(
        passport_id=payload.passport_id,
        source_code=payload.source_airport,
        destination_code=payload.destination_airport,
        departure_time=payload.departure_time,
        aircraft_number=payload.aircraft_number,
    )

@router.patch("/{ticket_id}/cancel", response_model=TicketCancelled, summary="Cancel a ticket", responses=_not_found)
def cancel_ticket(ticket_id: int, service: TicketService = Depends(get_ticket_service)):
    """Cancelling twice is allowed and returns the ticket unchanged.

    The seat of a cancelled ticket stays reserved on its flight.
    """
    ticket = service.cancel(ticket_id)
    return TicketCancelled(message="Ticket cancelled", ticket=TicketOut.model_validate(ticket))

@router.patch(
    "/{ticket_id}/seat",
    response_model=TicketOut,
    summary="Change seat of a ticket",
    responses={
        400: {"model": ErrorOut, "description": "Cannot change seat of a cancelled ticket"},
        **_not_found,
        **_no_seat,
    },
)
def change_seat(ticket_id: int, service: TicketService = Depends(get_ticket_service)):
    return service.change_seat(ticket_id)
