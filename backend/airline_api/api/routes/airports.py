from fastapi import APIRouter, Depends, status

from airline_api.api.deps import get_airport_directory
from airline_api.schemas.airport import AirportCreate, AirportOut
from airline_api.schemas.ticket import ValidationErrorOut
from airline_api.services.airport_directory import AirportDirectory

router = APIRouter()

@router.get("", response_model=list[AirportOut], summary="Get all airports")
@router.get("/", response_model=list[AirportOut], include_in_schema=False)
def list_airports(airports: AirportDirectory = Depends(get_airport_directory)):
    return airports.list_all()

@router.post(
    "",
    response_model=AirportOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new airport",
    responses={422: {"model": ValidationErrorOut, "description": "Validation error"}},
)
@router.post("/", response_model=AirportOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_airport(payload: AirportCreate, airports: AirportDirectory = Depends(get_airport_directory)):
    return airports.insert(payload.code, payload.name, payload.country)
