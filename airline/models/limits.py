"""
Fixed capacity and field-width limits shared by the models and the codec.

Text limits are in bytes of UTF-8; the on-disk fields reserve one extra
byte for the NUL terminator.
"""

MAX_SEATS = 100
MAX_NAME_LEN = 49
MAX_PLACE_LEN = 49
MAX_TIME_LEN = 9
PNR_LEN = 9

# Flight numbers are stored as int32
MAX_FLIGHT_NUMBER = 2**31 - 1

MIN_AGE = 1
MAX_AGE = 120


def byte_length(value: str) -> int:
    return len(value.encode("utf-8"))
