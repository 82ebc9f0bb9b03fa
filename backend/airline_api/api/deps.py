from fastapi import Depends
from sqlalchemy.orm import Session

from airline_api.db.session import get_db
from airline_api.services.airport_directory import AirportDirectory
from airline_api.services.ticket_service import TicketService


def get_airport_directory(db: Session = Depends(get_db)) -> AirportDirectory:
    return AirportDirectory(db)


def get_ticket_service(
    db: Session = Depends(get_db),
    airports: AirportDirectory = Depends(get_airport_directory),
) -> TicketService:
    return TicketService(db, airports=airports)
