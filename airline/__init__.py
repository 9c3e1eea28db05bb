"""
Airline reservation manager.

Tracks flights and passenger bookings in flat fixed-width record files and
provides the operations a menu-driven front end needs:
1. Flight catalog management (add, delete, list, seat adjustment)
2. Reservation ledger (book, cancel, modify, lookup by PNR)
3. Revenue reporting over active bookings

All updates go through a stage-then-swap rewrite so a crash mid-write never
leaves a half-written table behind.
"""

__version__ = "0.1.0"
