"""Parsing of human-written delay specifications.

A delay is a decimal integer optionally followed by a unit suffix, for
example "500ms", "2s" or "1h". A bare integer means whole seconds and the
literal "-1" means the maximum representable duration.

Durations are whole nanoseconds.
"""

import re
from typing import NewType

Duration = NewType("Duration", int)

NANOSECONDS_IN_MICROSECOND = 1_000
NANOSECONDS_IN_MILLISECOND = 1_000_000
NANOSECONDS_IN_SECOND = 1_000_000_000

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * 60
SECONDS_IN_DAY = SECONDS_IN_HOUR * 24

# A deci-second is 1/10 second, a centi-second 1/100 second.
MILLISECONDS_IN_DS = 100
MILLISECONDS_IN_CS = 10

# Largest value of an unsigned 64-bit seconds counter plus a sub-second part.
MAX_DURATION = Duration((2**64 - 1) * NANOSECONDS_IN_SECOND + NANOSECONDS_IN_SECOND - 1)

ERR_NEED_DURATION = "must specify time duration"
ERR_BAD_DURATION_SUFFIX = "invalid time duration suffix"
ERR_DURATION_OUT_OF_RANGE = "time duration out of range"

_NUMERIC_PATTERN = re.compile(r"[0-9]+")

_UNIT_NANOSECONDS = {
    "d": SECONDS_IN_DAY * NANOSECONDS_IN_SECOND,
    "h": SECONDS_IN_HOUR * NANOSECONDS_IN_SECOND,
    "m": SECONDS_IN_MINUTE * NANOSECONDS_IN_SECOND,
    "s": NANOSECONDS_IN_SECOND,
    "ds": MILLISECONDS_IN_DS * NANOSECONDS_IN_MILLISECOND,
    "cs": MILLISECONDS_IN_CS * NANOSECONDS_IN_MILLISECOND,
    "ms": NANOSECONDS_IN_MILLISECOND,
    "us": NANOSECONDS_IN_MICROSECOND,
    "ns": 1,
}

_DISPLAY_UNITS = (
    ("s", NANOSECONDS_IN_SECOND),
    ("ms", NANOSECONDS_IN_MILLISECOND),
    ("us", NANOSECONDS_IN_MICROSECOND),
)


class InvalidDurationError(ValueError):
    """Error raised when a delay specification cannot be parsed."""


def _parse_count(prefix: str) -> int:
    if _NUMERIC_PATTERN.fullmatch(prefix) is None:
        raise InvalidDurationError(f"invalid time duration value: {prefix!r}")
    return int(prefix)


def parse_duration(value: str) -> Duration:
    """Convert a delay specification into a duration in nanoseconds.

    The unit suffix starts at the first alphabetic character and must match
    one of d, h, m, s, ds, cs, ms, us or ns exactly.

    Args:
        value: Delay specification, e.g. "10", "10s", "250ms" or "-1"

    Returns:
        Parsed duration, MAX_DURATION for "-1"

    Raises:
        InvalidDurationError: If the specification is empty, has an unknown
            suffix, its numeric part is not a non-negative integer, or it
            exceeds MAX_DURATION
    """
    if not value:
        raise InvalidDurationError(ERR_NEED_DURATION)

    if value == "-1":
        return MAX_DURATION

    suffix_start = next((i for i, char in enumerate(value) if char.isalpha()), None)
    if suffix_start is None:
        prefix, suffix = value, "s"
    else:
        prefix, suffix = value[:suffix_start], value[suffix_start:]

    count = _parse_count(prefix)

    scale = _UNIT_NANOSECONDS.get(suffix)
    if scale is None:
        raise InvalidDurationError(ERR_BAD_DURATION_SUFFIX)

    nanoseconds = count * scale
    if nanoseconds > MAX_DURATION:
        raise InvalidDurationError(ERR_DURATION_OUT_OF_RANGE)

    return Duration(nanoseconds)


def to_seconds(duration: Duration) -> float:
    """Convert a duration to seconds for sleeping."""
    return duration / NANOSECONDS_IN_SECOND


def format_duration(duration: Duration | None) -> str:
    """Render a duration for log records, using the largest exact unit."""
    if duration is None:
        return "none"
    if duration == MAX_DURATION:
        return "max"
    for suffix, scale in _DISPLAY_UNITS:
        if duration % scale == 0:
            return f"{duration // scale}{suffix}"
    return f"{duration}ns"
