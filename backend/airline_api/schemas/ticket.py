from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from airline_api.models.ticket import TicketStatus


class TicketCreate(BaseModel):
    # accepts passport_id as well as passportId
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    passport_id: str = Field(..., min_length=1, description="Passenger's passport ID", examples=["A1234567"])
    source_airport: str = Field(..., min_length=1, description="IATA code of the source airport", examples=["JFK"])
    destination_airport: str = Field(..., min_length=1, description="IATA code of the destination airport", examples=["LAX"])
    departure_time: datetime = Field(..., description="Scheduled departure time", examples=["2025-03-10T12:00:00"])
    aircraft_number: str = Field(..., min_length=1, description="Aircraft flight number", examples=["AA101"])


class TicketOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    passport_id: str
    source_airport: int
    destination_airport: int
    departure_time: datetime
    aircraft_number: str
    seat: str = Field(..., examples=["B12"])
    status: TicketStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TicketCancelled(BaseModel):
    message: str = "Ticket cancelled"
    ticket: TicketOut


class ErrorOut(BaseModel):
    detail: str


class ValidationErrorOut(BaseModel):
    # request-shape errors carry FastAPI's list of errors, domain checks a message
    detail: str | list[dict[str, Any]]
