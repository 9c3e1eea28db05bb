"""
Record storage layer.

This module contains the fixed-width codecs and the file-backed record
table used by the flight catalog and the reservation ledger.
"""

from .codec import (
    RecordCodec,
    FlightCodec,
    PassengerCodec,
    RecordDecodeError,
    RecordEncodeError,
)
from .record_store import RecordStore

__all__ = [
    "RecordCodec",
    "FlightCodec",
    "PassengerCodec",
    "RecordDecodeError",
    "RecordEncodeError",
    "RecordStore",
]
