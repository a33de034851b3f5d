import calendar
import datetime
import math
import time
from hmac import compare_digest
from typing import Union

from .constants import MAX_COUNTER, MAX_DIGITS, MIN_DIGITS
from .exceptions import (
    InvalidBreadthError,
    InvalidCounterError,
    InvalidDigitsError,
    InvalidPeriodError,
)

TimeLike = Union[int, float, datetime.datetime]


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))


def unix_time() -> int:
    """
    Whole seconds since the unix epoch. TOTP reads the clock only through here.
    """
    return int(time.time())


def to_unix_seconds(for_time: TimeLike) -> int:
    """
    :param for_time: unix seconds, or a datetime (naive values are taken as UTC)
    :returns: whole seconds since the epoch, rounded down
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo is None:
            return calendar.timegm(for_time.utctimetuple())
        return int(for_time.timestamp() // 1)
    if isinstance(for_time, bool) or not isinstance(for_time, (int, float)):
        raise TypeError("time must be a number of seconds or a datetime, not {!r}".format(for_time))
    if isinstance(for_time, float) and not math.isfinite(for_time):
        raise InvalidCounterError("time must be finite, got {!r}".format(for_time))
    return int(for_time // 1)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_digits(digits: int) -> int:
    if not _is_int(digits) or not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigitsError(
            "digits must be an integer between {} and {}, got {!r}".format(MIN_DIGITS, MAX_DIGITS, digits)
        )
    return digits


def validate_counter(counter: int) -> int:
    if not _is_int(counter):
        raise InvalidCounterError("counter must be an integer, got {!r}".format(counter))
    if counter < 0:
        raise InvalidCounterError("counter must be positive integer")
    if counter > MAX_COUNTER:
        raise InvalidCounterError("counter does not fit in 64 bits")
    return counter


def validate_breadth(breadth: int) -> int:
    if not _is_int(breadth) or breadth < 0:
        raise InvalidBreadthError("breadth must be a non-negative integer, got {!r}".format(breadth))
    return breadth


def validate_period(period: int) -> int:
    if not _is_int(period) or period <= 0:
        raise InvalidPeriodError("period must be a positive integer, got {!r}".format(period))
    return period
