"""
Reporting models for the airline reservation core.
"""

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class FinancialSummaryModel(BaseModel):
    """Revenue totals over active bookings."""
    model_config = ConfigDict(from_attributes=True)

    booking_count: int = Field(default=0, ge=0, description="Number of active bookings")
    total_revenue: Decimal = Field(default=Decimal("0.00"), ge=0, description="Sum of booked fares")
    average_fare: Decimal = Field(default=Decimal("0.00"), ge=0, description="Revenue per booking")
