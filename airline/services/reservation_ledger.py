"""
Reservation ledger built on the booking record table.

This module implements booking, cancellation and modification of
reservations, demonstrating:
- Seat availability checks against active bookings
- Copy-rewrite updates for cancel and modify (records are never deleted)
- Explicit reporting of partially applied multi-step updates, since the
  booking record and the flight seat counts live in separate tables
"""

import logging
from typing import Dict, List, Optional, Union

from ..exceptions import NotFound, ValidationRejected
from ..models.enums import Gender, PaymentMethod, TransactionStatus
from ..models.limits import MAX_SEATS, MAX_NAME_LEN, MIN_AGE, MAX_AGE, byte_length
from ..models.passenger import BookingChangesModel, PassengerDetailsModel, PassengerModel
from ..models.results import BookingResultModel, ModificationResultModel
from ..storage.codec import PassengerCodec
from ..storage.record_store import RecordStore
from ..utils.config import ReservationConfig
from .flight_catalog import FlightCatalog
from .pnr import PNRGenerator

logger = logging.getLogger(__name__)


class ReservationLedger:
    """
    Reservation ledger operations.

    Features:
    - Seat availability per flight (an absent table means every seat is free)
    - Booking with fare snapshot and PNR generation
    - Cancellation that keeps the record and releases one seat
    - Field-by-field modification, including moving to another flight
    """

    def __init__(
        self,
        store: RecordStore[PassengerModel],
        catalog: FlightCatalog,
        pnr_generator: Optional[PNRGenerator] = None,
    ):
        """
        Initialize the ledger.

        Args:
            store: Booking record table
            catalog: Flight catalog used for existence, fares and seat counts
            pnr_generator: PNR source, seeded from the clock by default
        """
        self.store = store
        self.catalog = catalog
        self.pnr_generator = pnr_generator or PNRGenerator()

    @classmethod
    def from_config(
        cls,
        config: ReservationConfig,
        catalog: Optional[FlightCatalog] = None,
        pnr_generator: Optional[PNRGenerator] = None,
    ) -> "ReservationLedger":
        """Build a ledger over the reservation file named in the configuration."""
        return cls(
            RecordStore(config.reservation_path, PassengerCodec()),
            catalog or FlightCatalog.from_config(config),
            pnr_generator,
        )

    # --- Lookups ---

    def is_seat_available(self, flight_number: int, seat_number: int) -> bool:
        """False if the seat is out of range or held by an active booking."""
        if not 1 <= seat_number <= MAX_SEATS:
            return False
        return not any(
            p.is_booked and p.flight_number == flight_number and p.seat_number == seat_number
            for p in self.store.scan_all()
        )

    def occupied_seats(self, flight_number: int) -> List[int]:
        """Seat numbers held by active bookings on a flight, ascending."""
        return sorted({
            p.seat_number
            for p in self.store.scan_all()
            if p.is_booked and p.flight_number == flight_number
        })

    def free_seats(self, flight_number: int) -> List[int]:
        occupied = set(self.occupied_seats(flight_number))
        return [seat for seat in range(1, MAX_SEATS + 1) if seat not in occupied]

    def list_active(self) -> List[PassengerModel]:
        return [p for p in self.store.scan_all() if p.is_booked]

    def find_active(self, pnr: str) -> PassengerModel:
        """
        Look up the active booking with a PNR.

        Raises:
            NotFound: If no active booking has that PNR
        """
        for p in self.store.scan_all():
            if p.is_booked and p.pnr == pnr:
                return p
        raise NotFound(f"No active booking with PNR {pnr}")

    # --- Updates ---

    def book(
        self,
        flight_number: int,
        details: PassengerDetailsModel,
        seat_number: int,
        payment_method: PaymentMethod,
    ) -> BookingResultModel:
        """
        Book a seat on a flight.

        The booking is appended first, then one seat is taken from the
        flight. If that decrement fails the booking stays recorded and the
        result status is PARTIAL.

        Args:
            flight_number: Flight to book
            details: Passenger name, age and gender
            seat_number: Requested seat (1-based)
            payment_method: How the fare is paid

        Returns:
            BookingResultModel: REJECTED if the flight is unknown or full or
                the seat is taken, otherwise the recorded booking
        """
        if not self.catalog.exists(flight_number):
            logger.info(f"Booking rejected: flight {flight_number} unknown or full")
            return BookingResultModel(
                status=TransactionStatus.REJECTED,
                reason=f"Flight {flight_number} does not exist or has no seats left",
            )

        if not self.is_seat_available(flight_number, seat_number):
            logger.info(f"Booking rejected: seat {seat_number} on flight {flight_number} taken")
            return BookingResultModel(
                status=TransactionStatus.REJECTED,
                reason=f"Seat {seat_number} is not available on flight {flight_number}",
            )

        passenger = PassengerModel(
            name=details.name,
            age=details.age,
            gender=details.gender,
            seat_number=seat_number,
            pnr=self.pnr_generator.generate(),
            flight_number=flight_number,
            fare=self.catalog.fare(flight_number),
            payment_method=payment_method,
            is_booked=True,
        )
        self.store.append(passenger)
        logger.info(
            f"Booked PNR {passenger.pnr}: flight {flight_number}, seat {seat_number}, "
            f"fare {passenger.fare}"
        )

        if not self.catalog.adjust_seats(flight_number, -1):
            logger.warning(
                f"Booking {passenger.pnr} recorded but seat count of flight "
                f"{flight_number} could not be decremented"
            )
            return BookingResultModel(
                status=TransactionStatus.PARTIAL,
                passenger=passenger,
                reason="Booking recorded, seat adjustment failed",
            )

        return BookingResultModel(status=TransactionStatus.COMPLETED, passenger=passenger)

    def cancel(self, pnr: str) -> bool:
        """
        Cancel the active booking with a PNR and release its seat.

        The record stays in the table with is_booked=False.

        Returns:
            bool: False if no active booking has that PNR
        """
        cancelled: List[PassengerModel] = []

        def matches(p: PassengerModel) -> bool:
            # Only the first active record with this PNR is cancelled
            if cancelled or not p.is_booked or p.pnr != pnr:
                return False
            cancelled.append(p)
            return True

        if not self.store.rewrite_where(matches, lambda p: p.model_copy(update={"is_booked": False})):
            logger.info(f"Cancel: no active booking with PNR {pnr}")
            return False

        booking = cancelled[0]
        logger.info(
            f"Cancelled PNR {pnr}: flight {booking.flight_number}, seat {booking.seat_number}, "
            f"refund {booking.fare}"
        )
        if not self.catalog.adjust_seats(booking.flight_number, 1):
            logger.warning(
                f"Booking {pnr} cancelled but seat on flight {booking.flight_number} "
                f"could not be released"
            )
        return True

    def modify(self, pnr: str, changes: BookingChangesModel) -> ModificationResultModel:
        """
        Apply field changes to an active booking.

        Every requested field is validated on its own; fields that fail are
        reported in ``rejected`` and keep their old value while the rest are
        applied. Moving to another flight re-snapshots the fare, releases a
        seat on the old flight and takes one on the new flight.

        Returns:
            ModificationResultModel: matched=False if no active booking has
                that PNR; status PARTIAL if a seat count could not be moved
        """
        try:
            current = self.find_active(pnr)
        except NotFound:
            logger.info(f"Modify: no active booking with PNR {pnr}")
            return ModificationResultModel(matched=False)

        rejected: Dict[str, str] = {}
        updates = self._validate_personal_changes(changes, rejected)

        target_flight = current.flight_number
        if changes.flight_number is not None and changes.flight_number != current.flight_number:
            if self.catalog.exists(changes.flight_number):
                target_flight = changes.flight_number
            else:
                self._reject(rejected, "flight_number", changes.flight_number,
                             "flight does not exist or has no seats left")

        target_seat = current.seat_number
        if changes.seat_number is not None and (
            changes.seat_number != current.seat_number or target_flight != current.flight_number
        ):
            if self.is_seat_available(target_flight, changes.seat_number):
                target_seat = changes.seat_number
            else:
                self._reject(rejected, "seat_number", changes.seat_number,
                             f"seat is not available on flight {target_flight}")

        # The kept seat must also be free on the new flight
        if target_flight != current.flight_number and target_seat == current.seat_number:
            if not self.is_seat_available(target_flight, target_seat):
                self._reject(rejected, "flight_number", target_flight,
                             f"seat {target_seat} is taken on that flight")
                target_flight = current.flight_number

        if target_flight != current.flight_number:
            updates["flight_number"] = target_flight
            updates["fare"] = self.catalog.fare(target_flight)
        if target_seat != current.seat_number:
            updates["seat_number"] = target_seat

        applied = [name for name, value in updates.items() if getattr(current, name) != value]
        if not applied:
            return ModificationResultModel(
                matched=True,
                status=TransactionStatus.COMPLETED,
                passenger=current,
                rejected=rejected,
            )

        updated: List[PassengerModel] = []

        def matches(p: PassengerModel) -> bool:
            if updated or not p.is_booked or p.pnr != pnr:
                return False
            return True

        def apply(p: PassengerModel) -> PassengerModel:
            new_record = p.model_copy(update=updates)
            updated.append(new_record)
            return new_record

        if not self.store.rewrite_where(matches, apply):
            return ModificationResultModel(matched=False)

        passenger = updated[0]
        logger.info(f"Modified PNR {pnr}: {', '.join(applied)}")

        status = TransactionStatus.COMPLETED
        if passenger.flight_number != current.flight_number:
            released = self.catalog.adjust_seats(current.flight_number, 1)
            reserved = self.catalog.adjust_seats(passenger.flight_number, -1)
            if not (released and reserved):
                status = TransactionStatus.PARTIAL
                logger.warning(
                    f"Booking {pnr} moved from flight {current.flight_number} to "
                    f"{passenger.flight_number} but seat counts are inconsistent "
                    f"(released={released}, reserved={reserved})"
                )

        return ModificationResultModel(
            matched=True,
            status=status,
            passenger=passenger,
            applied=applied,
            rejected=rejected,
        )

    # --- Helpers ---

    def _validate_personal_changes(
        self, changes: BookingChangesModel, rejected: Dict[str, str]
    ) -> Dict[str, object]:
        updates: Dict[str, object] = {}

        if changes.name is not None:
            if changes.name and byte_length(changes.name) <= MAX_NAME_LEN:
                updates["name"] = changes.name
            else:
                self._reject(rejected, "name", changes.name,
                             f"name must be 1-{MAX_NAME_LEN} bytes")

        if changes.age is not None:
            if MIN_AGE <= changes.age <= MAX_AGE:
                updates["age"] = changes.age
            else:
                self._reject(rejected, "age", changes.age,
                             f"age must be between {MIN_AGE} and {MAX_AGE}")

        if changes.gender is not None:
            try:
                updates["gender"] = Gender(changes.gender.strip().upper())
            except ValueError:
                self._reject(rejected, "gender", changes.gender, "gender must be M or F")

        if changes.payment_method is not None:
            method = self._coerce_payment_method(changes.payment_method)
            if method is not None:
                updates["payment_method"] = method
            else:
                self._reject(rejected, "payment_method", changes.payment_method,
                             "unknown payment method")

        return updates

    @staticmethod
    def _coerce_payment_method(value: Union[PaymentMethod, int]) -> Optional[PaymentMethod]:
        if isinstance(value, PaymentMethod):
            return value
        try:
            return PaymentMethod.from_code(value)
        except ValueError:
            return None

    @staticmethod
    def _reject(rejected: Dict[str, str], field: str, value, reason: str) -> None:
        error = ValidationRejected(field, value, reason)
        logger.info(f"Modify: {error}")
        rejected[field] = error.reason
