"""
Enums for the airline reservation core.

This module contains the enumeration types shared by models, services and the
record codec.
"""

from enum import Enum


class Gender(str, Enum):
    """Passenger gender as recorded on the booking."""
    MALE = "M"
    FEMALE = "F"


class PaymentMethod(str, Enum):
    """Payment method used for a booking."""
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    NET_BANKING = "net_banking"
    UPI = "upi"

    @property
    def code(self) -> int:
        """Numeric code (1-4) stored in the booking record."""
        return _PAYMENT_CODES[self]

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> "PaymentMethod":
        for method, method_code in _PAYMENT_CODES.items():
            if method_code == code:
                return method
        raise ValueError(f"Unknown payment method code: {code}")


_PAYMENT_CODES = {
    PaymentMethod.CREDIT_CARD: 1,
    PaymentMethod.DEBIT_CARD: 2,
    PaymentMethod.NET_BANKING: 3,
    PaymentMethod.UPI: 4,
}

_PAYMENT_LABELS = {
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.DEBIT_CARD: "Debit Card",
    PaymentMethod.NET_BANKING: "Net Banking",
    PaymentMethod.UPI: "UPI",
}


class TransactionStatus(str, Enum):
    """Outcome of a multi-step ledger update."""
    COMPLETED = "completed"    # Record written and seat counts adjusted
    PARTIAL = "partial"        # Record written, a seat adjustment failed
    REJECTED = "rejected"      # Preconditions failed, nothing written
