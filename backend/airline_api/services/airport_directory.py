import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from airline_api.core.errors import ValidationError
from airline_api.models.airport import Airport

logger = logging.getLogger(__name__)

AIRPORT_CODE_LENGTH = 3


class AirportDirectory:
    """Airport catalog lookups backed by the ``airports`` table."""

    def __init__(self, db: Session):
        self.db = db

    def resolve_code(self, code: str) -> int | None:
        """Return the airport id for an exact (case-sensitive) code, or None."""
        return self.db.scalar(select(Airport.id).where(Airport.code == code))

    def get(self, airport_id: int) -> Airport | None:
        return self.db.get(Airport, airport_id)

    def list_all(self) -> list[Airport]:
        return list(self.db.scalars(select(Airport).order_by(Airport.id)))

    def insert(self, code: str, name: str, country: str) -> Airport:
        for field, value in (("code", code), ("name", name), ("country", country)):
            if not value or not value.strip():
                raise ValidationError(f"The {field} field is required.")
        if len(code) != AIRPORT_CODE_LENGTH:
            raise ValidationError(f"The code must be {AIRPORT_CODE_LENGTH} characters.")
        if self.resolve_code(code) is not None:
            raise ValidationError("The code has already been taken.")
        airport = Airport(code=code, name=name, country=country)
        self.db.add(airport)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent insert of the same code
            self.db.rollback()
            raise ValidationError("The code has already been taken.")
        self.db.refresh(airport)
        logger.info("Airport %s (%s) registered with id=%s", airport.code, airport.name, airport.id)
        return airport
