"""
Passenger and booking models for the airline reservation core.

This module contains the booking record stored in the reservation table, the
personal details supplied when booking, and the partial update accepted by
modify.
"""

from decimal import Decimal
from typing import Optional, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .enums import Gender, PaymentMethod
from .limits import MAX_SEATS, MAX_FLIGHT_NUMBER, MAX_NAME_LEN, PNR_LEN, MIN_AGE, MAX_AGE, byte_length


def _check_name(v: str) -> str:
    if byte_length(v) > MAX_NAME_LEN:
        raise ValueError(f"must be at most {MAX_NAME_LEN} bytes")
    return v


class PassengerDetailsModel(BaseModel):
    """Personal details collected from the passenger at booking time."""
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., min_length=1, description="Passenger name")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    gender: Gender = Field(..., description="M or F")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)


class PassengerModel(BaseModel):
    """
    Booking record as stored in the reservation table.

    Records are never removed; a cancelled booking keeps every field and
    only flips is_booked to False.
    """
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Passenger name")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    gender: Gender = Field(..., description="M or F")
    seat_number: int = Field(..., ge=1, le=MAX_SEATS, description="Seat number (1-based)")
    pnr: str = Field(..., min_length=PNR_LEN, max_length=PNR_LEN, description="Booking reference")
    flight_number: int = Field(..., ge=1, le=MAX_FLIGHT_NUMBER, description="Booked flight")
    fare: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Fare paid at booking")
    payment_method: PaymentMethod = Field(..., description="How the fare was paid")
    is_booked: bool = Field(default=True, description="False once cancelled")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)


class BookingChangesModel(BaseModel):
    """
    Requested changes to an active booking.

    Fields left as None are kept. Values are loosely typed:
    each one is checked by the ledger and rejected individually instead of
    failing the whole request.
    """
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    flight_number: Optional[int] = None
    seat_number: Optional[int] = None
    payment_method: Optional[Union[PaymentMethod, int]] = None
