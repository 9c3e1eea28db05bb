"""
Main entry point for the airline reservation core.
"""

import logging

from airline.exceptions import StorageUnavailable
from airline.services import FlightCatalog, ReservationLedger, ReportingService
from airline.utils.config import get_config, configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Initialise the record files and print a short status summary."""
    try:
        config = get_config()
    except ValueError as e:
        print(f"Failed to load configuration: {e}")
        return 1

    configure_logging(config.log_level)

    catalog = FlightCatalog.from_config(config)
    ledger = ReservationLedger.from_config(config, catalog=catalog)
    reporting = ReportingService(ledger)

    try:
        catalog.store.ensure_exists()
        ledger.store.ensure_exists()
        flights = catalog.list_all()
        summary = reporting.financial_summary()
    except StorageUnavailable as e:
        logger.error(f"Record storage is not usable: {e}")
        return 1

    print("AIRLINE RESERVATION SYSTEM")
    print("=" * 40)
    print(f"Flights:          {len(flights)}")
    print(f"Active bookings:  {summary.booking_count}")
    print(f"Total revenue:    ${summary.total_revenue:.2f}")
    print(f"Average fare:     ${summary.average_fare:.2f}")
    return 0


if __name__ == "__main__":
    exit(main())
