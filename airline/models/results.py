"""
Result models for ledger operations that touch more than one record.

Booking and modification write a passenger record and adjust one or two
flight seat counts without a shared transaction, so the outcome is reported
explicitly instead of being left implicit.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from .enums import TransactionStatus
from .passenger import PassengerModel


class BookingResultModel(BaseModel):
    """Outcome of ReservationLedger.book."""

    status: TransactionStatus = Field(..., description="Overall outcome")
    passenger: Optional[PassengerModel] = Field(None, description="Recorded booking, if any")
    reason: Optional[str] = Field(None, description="Why the booking was rejected or partial")

    @property
    def recorded(self) -> bool:
        """True when the booking record was written."""
        return self.status != TransactionStatus.REJECTED


class ModificationResultModel(BaseModel):
    """Outcome of ReservationLedger.modify; truthy iff the PNR matched."""

    matched: bool = Field(..., description="Whether an active booking had the PNR")
    status: TransactionStatus = Field(default=TransactionStatus.REJECTED)
    passenger: Optional[PassengerModel] = Field(None, description="Booking after the update")
    applied: List[str] = Field(default_factory=list, description="Fields that changed")
    rejected: Dict[str, str] = Field(default_factory=dict, description="Field -> rejection reason")

    def __bool__(self) -> bool:
        return self.matched
