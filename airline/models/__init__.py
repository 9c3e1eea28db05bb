"""
Airline reservation Pydantic models package.

This package contains the Pydantic v2 models and enums used for flights,
bookings, operation results and reports.
"""

# Enums
from .enums import (
    Gender,
    PaymentMethod,
    TransactionStatus,
)

from .limits import MAX_SEATS, MAX_FLIGHT_NUMBER

# Record models
from .flight import FlightModel
from .passenger import (
    PassengerDetailsModel,
    PassengerModel,
    BookingChangesModel,
)

# Operation results and reports
from .results import (
    BookingResultModel,
    ModificationResultModel,
)
from .report import FinancialSummaryModel

__all__ = [
    # Enums
    "Gender",
    "PaymentMethod",
    "TransactionStatus",
    "MAX_SEATS",
    "MAX_FLIGHT_NUMBER",

    # Record models
    "FlightModel",
    "PassengerDetailsModel",
    "PassengerModel",
    "BookingChangesModel",

    # Results
    "BookingResultModel",
    "ModificationResultModel",
    "FinancialSummaryModel",
]
