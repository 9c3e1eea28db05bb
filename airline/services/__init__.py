"""
Business logic services for the reservation core.

This module contains the flight catalog, the reservation ledger, PNR
generation and revenue reporting.
"""

from .pnr import PNRGenerator
from .flight_catalog import FlightCatalog
from .reservation_ledger import ReservationLedger
from .reporting import ReportingService

__all__ = [
    'PNRGenerator',
    'FlightCatalog',
    'ReservationLedger',
    'ReportingService',
]
