"""
Revenue reporting over the reservation ledger.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from ..models.report import FinancialSummaryModel
from .reservation_ledger import ReservationLedger

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class ReportingService:
    """Aggregates active bookings into revenue figures."""

    def __init__(self, ledger: ReservationLedger):
        self.ledger = ledger

    def financial_summary(self) -> FinancialSummaryModel:
        """
        Count active bookings and total their fares.

        Cancelled bookings are excluded. The average fare is zero when there
        are no active bookings.
        """
        count = 0
        total = Decimal("0.00")
        for booking in self.ledger.list_active():
            count += 1
            total += booking.fare

        average = (total / count).quantize(CENT, rounding=ROUND_HALF_UP) if count else Decimal("0.00")
        summary = FinancialSummaryModel(
            booking_count=count,
            total_revenue=total.quantize(CENT),
            average_fare=average,
        )
        logger.debug(f"Financial summary: {summary}")
        return summary
