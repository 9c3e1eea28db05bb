"""
PNR (booking reference) generation.

A PNR is the local date as YYMMDD followed by a zero-padded random number
in [0, 9999], cut to 9 characters, so only the first three digits of the
suffix survive. Two bookings on the same day can receive the same PNR; no
uniqueness check is made at generation time.
"""

import logging
import random
import time
from datetime import datetime
from typing import Callable, Optional

from ..models.limits import PNR_LEN

logger = logging.getLogger(__name__)

PNR_SUFFIX_RANGE = 10000


class PNRGenerator:
    """
    Generates PNRs from the wall clock and a pseudo-random suffix.

    The random source is seeded once, when the generator is created. It is
    not cryptographically secure.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed, defaults to the current time
            clock: Returns the current local datetime, defaults to datetime.now
        """
        self._random = random.Random(seed if seed is not None else time.time_ns())
        self._clock = clock or datetime.now

    def generate(self) -> str:
        """Return a new 9-character PNR."""
        now = self._clock()
        suffix = self._random.randrange(PNR_SUFFIX_RANGE)
        return f"{now:%y%m%d}{suffix:04d}"[:PNR_LEN]
