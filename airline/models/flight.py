"""
Flight model for the airline reservation core.

A flight is a fixed-width catalog record; the only field that changes after
creation is the available seat count.
"""

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .limits import MAX_SEATS, MAX_FLIGHT_NUMBER, MAX_PLACE_LEN, MAX_TIME_LEN, byte_length


class FlightModel(BaseModel):
    """
    Catalog entry for a single flight.

    The fare here is the current fare; bookings keep their own snapshot.
    """
    model_config = ConfigDict(from_attributes=True)

    flight_number: int = Field(
        ..., ge=1, le=MAX_FLIGHT_NUMBER, description="Caller-assigned flight number"
    )
    destination: str = Field(..., description="Destination city")
    departure: str = Field(..., description="Departure city")
    time: str = Field(..., description="Departure time (HH:MM)")
    fare: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Current fare")
    available_seats: int = Field(
        default=MAX_SEATS, ge=0, le=MAX_SEATS, description="Unbooked seats left"
    )

    @field_validator("destination", "departure")
    @classmethod
    def validate_place(cls, v: str) -> str:
        if byte_length(v) > MAX_PLACE_LEN:
            raise ValueError(f"must be at most {MAX_PLACE_LEN} bytes")
        return v

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if byte_length(v) > MAX_TIME_LEN:
            raise ValueError(f"must be at most {MAX_TIME_LEN} bytes")
        return v
