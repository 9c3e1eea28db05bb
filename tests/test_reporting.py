"""
Tests for the financial summary report.
"""

from decimal import Decimal

from airline.models import PassengerDetailsModel, PaymentMethod, Gender


class TestFinancialSummary:
    """Test revenue aggregation over active bookings."""

    def test_empty_ledger(self, reporting):
        summary = reporting.financial_summary()
        assert summary.booking_count == 0
        assert summary.total_revenue == Decimal("0.00")
        assert summary.average_fare == Decimal("0.00")

    def test_totals_and_average(self, reporting, ledger, catalog, make_flight, passenger_a):
        catalog.add(make_flight(100, fare="250.00"))
        catalog.add(make_flight(200, fare="300.00"))
        ledger.book(100, passenger_a, 1, PaymentMethod.UPI)
        ledger.book(100, passenger_a, 2, PaymentMethod.UPI)
        ledger.book(200, passenger_a, 1, PaymentMethod.UPI)

        summary = reporting.financial_summary()

        assert summary.booking_count == 3
        assert summary.total_revenue == Decimal("800.00")
        assert summary.average_fare == Decimal("266.67")

    def test_cancelled_bookings_excluded(self, reporting, ledger, catalog, make_flight, passenger_a):
        catalog.add(make_flight(100, fare="120.50"))
        kept = ledger.book(100, passenger_a, 1, PaymentMethod.CREDIT_CARD).passenger
        dropped = ledger.book(100, passenger_a, 2, PaymentMethod.CREDIT_CARD).passenger
        ledger.cancel(dropped.pnr)

        summary = reporting.financial_summary()

        assert summary.booking_count == 1
        assert summary.total_revenue == kept.fare == Decimal("120.50")
        assert summary.average_fare == Decimal("120.50")

    def test_uses_booked_fare_not_current_fare(self, reporting, ledger, catalog, make_flight):
        catalog.add(make_flight(100, fare="100.00"))
        details = PassengerDetailsModel(name="Carol", age=52, gender=Gender.FEMALE)
        ledger.book(100, details, 3, PaymentMethod.DEBIT_CARD)
        catalog.delete(100)
        catalog.add(make_flight(100, fare="500.00"))

        assert reporting.financial_summary().total_revenue == Decimal("100.00")
