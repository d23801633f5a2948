"""The three public formatting functions.

Each one normalizes its argument to an unsigned 64-bit integer and renders
it against a fixed unit ladder:

    >>> format_dhms(6_000_000)
    '69d10h40m'
    >>> format_wdhms(6_000_000)
    '9w6d10h40m'
    >>> format_ns(3_000_129_723)
    '3s129µs723ns'

Lossy narrowing:
    Inputs are reduced to their low 64 bits (`value & U64_MAX`) before
    formatting. A value wider than 64 bits wraps around instead of being
    clamped or rejected, so `format_dhms(2**64 + 5)` returns "5s". A negative
    int maps to its two's-complement bit pattern. Nothing is raised for
    either case; a DEBUG record is logged instead.
"""

import logging
import operator
from datetime import timedelta
from typing import Any, Literal

from compound_duration.ladder import DHMS, DHMS_NS, WDHMS
from compound_duration.util import DAY, NANOS, U64_MAX

logger = logging.getLogger(__name__)

Scale = Literal["seconds", "nanoseconds"]


def _timedelta_count(delta: timedelta, scale: Scale) -> int:
    """Convert a timedelta to whole seconds or nanoseconds without floats."""
    seconds = delta.days * DAY + delta.seconds
    if scale == "seconds":
        return seconds
    return seconds * NANOS + delta.microseconds * 1_000


def to_u64(value: Any, scale: Scale = "seconds") -> int:
    """Normalize a count to the fixed 64-bit computation width.

    Accepts:
    - int, or anything implementing `__index__` (e.g. NumPy integers)
    - timedelta: converted to whole `scale` units

    Raises:
        TypeError: If value is not integer-like or a timedelta
    """
    if isinstance(value, timedelta):
        count = _timedelta_count(value, scale)
    else:
        try:
            count = operator.index(value)
        except TypeError:
            raise TypeError(
                f"Duration must be an integer count of {scale} or a timedelta.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Hint: convert explicitly, e.g. int(elapsed) or "
                f"time.perf_counter_ns() for nanoseconds"
            ) from None

    narrowed = count & U64_MAX
    if narrowed != count:
        logger.debug("narrowed %d %s to 64 bits: %d", count, scale, narrowed)
    return narrowed


def format_dhms(seconds: int | timedelta) -> str:
    """Format seconds as days, hours, minutes and seconds.

    Example:
        >>> format_dhms(7259)
        '2h59s'
    """
    return DHMS.render(to_u64(seconds, "seconds"))


def format_wdhms(seconds: int | timedelta) -> str:
    """Format seconds as weeks, days, hours, minutes and seconds.

    Example:
        >>> format_wdhms(4_294_967_295)
        '7101w3d6h28m15s'
    """
    return WDHMS.render(to_u64(seconds, "seconds"))


def format_ns(nanoseconds: int | timedelta) -> str:
    """Format nanoseconds as days down to nanoseconds.

    Sub-second units are ms, µs (MICRO SIGN, U+00B5) and ns.

    Example:
        >>> import time
        >>> start = time.perf_counter_ns()
        >>> # do something ...
        >>> print(format_ns(time.perf_counter_ns() - start))  # doctest: +SKIP
        >>> format_ns(1_000_001)
        '1ms1ns'
    """
    return DHMS_NS.render(to_u64(nanoseconds, "nanoseconds"))
