"""
Fixed-width binary codecs for the flight and reservation tables.

Each record kind has an explicit little-endian layout built with ``struct``.
Text fields are NUL padded to fixed widths (limit + 1 byte), fares
are stored as integer cents so that decimal fares survive a round trip
exactly.
"""

import struct
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Generic, TypeVar

from pydantic import ValidationError

from ..models.enums import Gender, PaymentMethod
from ..models.flight import FlightModel
from ..models.passenger import PassengerModel
from ..models.limits import MAX_NAME_LEN, MAX_PLACE_LEN, MAX_TIME_LEN, PNR_LEN

T = TypeVar("T")

CENT = Decimal("0.01")


class RecordDecodeError(ValueError):
    """Raised when stored bytes do not form a valid record."""
    pass


class RecordEncodeError(ValueError):
    """Raised when a record does not fit its fixed-width layout."""
    pass


def encode_text(value: str, width: int) -> bytes:
    """Encode text for a field of ``width`` bytes, keeping room for a NUL."""
    raw = value.encode("utf-8")
    if len(raw) >= width:
        raise RecordEncodeError(f"{value!r} does not fit in a {width}-byte field")
    return raw


def decode_text(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("utf-8")


def to_cents(amount: Decimal) -> int:
    return int(amount.quantize(CENT, rounding=ROUND_HALF_UP) * 100)


def from_cents(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-2)


class RecordCodec(ABC, Generic[T]):
    """Base class binding a ``struct`` layout to a record model."""

    layout: struct.Struct

    @property
    def record_size(self) -> int:
        return self.layout.size

    @abstractmethod
    def encode(self, record: T) -> bytes:
        pass

    @abstractmethod
    def decode(self, data: bytes) -> T:
        pass

    def _pack(self, *fields) -> bytes:
        try:
            return self.layout.pack(*fields)
        except struct.error as e:
            raise RecordEncodeError(f"Record does not fit layout {self.layout.format!r}: {e}") from e


class FlightCodec(RecordCodec[FlightModel]):
    """
    Flight record layout:

    ======  =====  ==========================
    field   bytes  encoding
    ======  =====  ==========================
    number  4      int32
    dest    50     UTF-8, NUL padded
    dep     50     UTF-8, NUL padded
    time    10     UTF-8, NUL padded
    fare    8      int64 cents
    seats   4      int32
    ======  =====  ==========================
    """

    layout = struct.Struct(f"<i{MAX_PLACE_LEN + 1}s{MAX_PLACE_LEN + 1}s{MAX_TIME_LEN + 1}sqi")

    def encode(self, record: FlightModel) -> bytes:
        return self._pack(
            record.flight_number,
            encode_text(record.destination, MAX_PLACE_LEN + 1),
            encode_text(record.departure, MAX_PLACE_LEN + 1),
            encode_text(record.time, MAX_TIME_LEN + 1),
            to_cents(record.fare),
            record.available_seats,
        )

    def decode(self, data: bytes) -> FlightModel:
        try:
            number, dest, dep, time, cents, seats = self.layout.unpack(data)
            return FlightModel(
                flight_number=number,
                destination=decode_text(dest),
                departure=decode_text(dep),
                time=decode_text(time),
                fare=from_cents(cents),
                available_seats=seats,
            )
        except (struct.error, UnicodeDecodeError, ValidationError) as e:
            raise RecordDecodeError(f"Invalid flight record: {e}") from e


class PassengerCodec(RecordCodec[PassengerModel]):
    """
    Booking record layout: name (50), age (int32), gender (1), seat (int32),
    pnr (10), flight (int32), fare cents (int64), payment code (int32),
    booked flag (1).
    """

    layout = struct.Struct(f"<{MAX_NAME_LEN + 1}sici{PNR_LEN + 1}siqi?")

    def encode(self, record: PassengerModel) -> bytes:
        return self._pack(
            encode_text(record.name, MAX_NAME_LEN + 1),
            record.age,
            record.gender.value.encode("ascii"),
            record.seat_number,
            encode_text(record.pnr, PNR_LEN + 1),
            record.flight_number,
            to_cents(record.fare),
            record.payment_method.code,
            record.is_booked,
        )

    def decode(self, data: bytes) -> PassengerModel:
        try:
            name, age, gender, seat, pnr, flight, cents, payment, booked = self.layout.unpack(data)
            return PassengerModel(
                name=decode_text(name),
                age=age,
                gender=Gender(gender.decode("ascii")),
                seat_number=seat,
                pnr=decode_text(pnr),
                flight_number=flight,
                fare=from_cents(cents),
                payment_method=PaymentMethod.from_code(payment),
                is_booked=booked,
            )
        except (struct.error, UnicodeDecodeError, ValueError) as e:
            raise RecordDecodeError(f"Invalid booking record: {e}") from e
