"""
Flight catalog built on the flight record table.

The catalog owns the seat-count invariant: a flight's available seats stay
within [0, MAX_SEATS], changing only through adjust_seats.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from ..exceptions import DuplicateFlightNumber, InvalidAdjustment, NotFound
from ..models.flight import FlightModel
from ..models.limits import MAX_SEATS
from ..storage.codec import FlightCodec
from ..storage.record_store import RecordStore
from ..utils.config import ReservationConfig

logger = logging.getLogger(__name__)


class FlightCatalog:
    """
    Flight catalog operations.

    Features:
    - Existence and fare lookup by flight number
    - Bounded seat-count adjustment
    - Add with duplicate detection, delete by rewrite
    - Listing of all flights or flights with seats left
    """

    def __init__(self, store: RecordStore[FlightModel]):
        self.store = store

    @classmethod
    def from_config(cls, config: ReservationConfig) -> "FlightCatalog":
        """Build a catalog over the flight file named in the configuration."""
        return cls(RecordStore(config.flight_path, FlightCodec()))

    def _find(self, flight_number: int) -> Optional[FlightModel]:
        for flight in self.store.scan_all():
            if flight.flight_number == flight_number:
                return flight
        return None

    def exists(self, flight_number: int) -> bool:
        """True iff the flight is in the catalog and still has seats."""
        return any(
            flight.flight_number == flight_number and flight.available_seats > 0
            for flight in self.store.scan_all()
        )

    def get(self, flight_number: int) -> FlightModel:
        """
        Look up a flight by number.

        Raises:
            NotFound: If no flight has that number
        """
        flight = self._find(flight_number)
        if flight is None:
            raise NotFound(f"Flight {flight_number} not found")
        return flight

    def fare(self, flight_number: int) -> Decimal:
        """
        Current fare of a flight.

        Raises:
            NotFound: If no flight has that number
        """
        return self.get(flight_number).fare

    def available_seats(self, flight_number: int) -> int:
        return self.get(flight_number).available_seats

    def adjust_seats(self, flight_number: int, delta: int) -> bool:
        """
        Add ``delta`` to a flight's available seats.

        The change is applied only if the result stays within
        [0, MAX_SEATS]; otherwise the record is left untouched.

        Returns:
            bool: True if the seat count was updated
        """
        seen: List[FlightModel] = []
        rejection: List[InvalidAdjustment] = []

        def matches(flight: FlightModel) -> bool:
            # Only the first record with this number is considered
            if flight.flight_number != flight_number or seen:
                return False
            seen.append(flight)
            new_seats = flight.available_seats + delta
            if 0 <= new_seats <= MAX_SEATS:
                return True
            rejection.append(InvalidAdjustment(flight_number, flight.available_seats, delta))
            return False

        def apply(flight: FlightModel) -> FlightModel:
            return flight.model_copy(
                update={"available_seats": flight.available_seats + delta}
            )

        updated = self.store.rewrite_where(matches, apply)
        if not seen:
            logger.warning(f"Seat adjustment on unknown flight {flight_number}")
        elif rejection:
            logger.warning(str(rejection[0]))
        elif updated:
            logger.debug(f"Flight {flight_number} seats adjusted by {delta:+d}")
        return updated

    def add(self, flight: FlightModel) -> FlightModel:
        """
        Add a flight to the catalog.

        Raises:
            DuplicateFlightNumber: If any flight already has that number
        """
        if self._find(flight.flight_number) is not None:
            logger.warning(f"Rejected duplicate flight number {flight.flight_number}")
            raise DuplicateFlightNumber(flight.flight_number)
        self.store.append(flight)
        logger.info(
            f"Added flight {flight.flight_number} {flight.departure} -> "
            f"{flight.destination} at {flight.time}"
        )
        return flight

    def delete(self, flight_number: int) -> bool:
        """
        Remove a flight from the catalog.

        Bookings on the flight are left as they are.

        Returns:
            bool: Whether a flight with that number was found
        """
        deleted = self.store.rewrite_where(
            lambda flight: flight.flight_number == flight_number,
            lambda flight: None,
        )
        if deleted:
            logger.info(f"Deleted flight {flight_number}")
        return deleted

    def list_all(self) -> List[FlightModel]:
        return list(self.store.scan_all())

    def list_available(self) -> List[FlightModel]:
        """Flights that still have at least one seat."""
        return [flight for flight in self.store.scan_all() if flight.available_seats > 0]
