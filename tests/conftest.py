"""
Shared fixtures for the reservation core tests.

Every fixture works on record files under pytest's tmp_path, so tests never
touch the working directory.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from airline.models import FlightModel, PassengerDetailsModel, Gender
from airline.services import FlightCatalog, ReservationLedger, ReportingService, PNRGenerator
from airline.utils.config import ReservationConfig


class SequentialPNRGenerator(PNRGenerator):
    """PNR generator with predictable, collision-free suffixes."""

    def __init__(self):
        super().__init__(seed=0, clock=lambda: datetime(2026, 10, 18, 9, 30))
        self.counter = 0

    def generate(self) -> str:
        self.counter += 1
        return f"{self._clock():%y%m%d}{self.counter:03d}"


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a temporary data directory."""
    return ReservationConfig(data_dir=tmp_path)


@pytest.fixture
def catalog(config):
    return FlightCatalog.from_config(config)


@pytest.fixture
def ledger(config, catalog):
    return ReservationLedger.from_config(
        config, catalog=catalog, pnr_generator=SequentialPNRGenerator()
    )


@pytest.fixture
def reporting(ledger):
    return ReportingService(ledger)


@pytest.fixture
def make_flight():
    """Factory for flight records with sensible defaults."""
    def _make(flight_number=100, destination="Paris", departure="NYC",
              time="14:30", fare="250.00", **kwargs):
        return FlightModel(
            flight_number=flight_number,
            destination=destination,
            departure=departure,
            time=time,
            fare=Decimal(fare),
            **kwargs,
        )
    return _make


@pytest.fixture
def passenger_a():
    return PassengerDetailsModel(name="Alice Smith", age=34, gender=Gender.FEMALE)


@pytest.fixture
def passenger_b():
    return PassengerDetailsModel(name="Bob Jones", age=41, gender=Gender.MALE)
