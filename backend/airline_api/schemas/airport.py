from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AirportCreate(BaseModel):
    code: str = Field(..., min_length=3, max_length=3, description="Airport IATA code (3-letter)", examples=["CDG"])
    name: str = Field(..., min_length=1, description="Full name of the airport", examples=["Charles de Gaulle Airport"])
    country: str = Field(..., min_length=1, description="Country where the airport is located", examples=["France"])


class AirportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    country: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
