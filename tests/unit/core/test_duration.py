"""Tests for delay specification parsing."""

import pytest

from urlspawn.core.duration import (
    ERR_BAD_DURATION_SUFFIX,
    ERR_NEED_DURATION,
    MAX_DURATION,
    NANOSECONDS_IN_SECOND,
    InvalidDurationError,
    format_duration,
    parse_duration,
    to_seconds,
)

SECOND = NANOSECONDS_IN_SECOND


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("3d", 3 * 86_400 * SECOND),
        ("3h", 3 * 3_600 * SECOND),
        ("3m", 3 * 60 * SECOND),
        ("3s", 3 * SECOND),
        ("3ds", 300_000_000),
        ("3cs", 30_000_000),
        ("3ms", 3_000_000),
        ("3us", 3_000),
        ("3ns", 3),
        ("0s", 0),
    ],
)
def test_parse_duration_scales_by_unit(value: str, expected: int) -> None:
    """Each unit suffix scales the integer by its fixed factor."""
    assert parse_duration(value) == expected


def test_bare_integer_is_seconds() -> None:
    """A value without a suffix is whole seconds."""
    assert parse_duration("10") == parse_duration("10s")
    assert parse_duration("10") == 10 * SECOND


def test_two_letter_suffix_is_not_confused_with_one_letter() -> None:
    """'ds' is deciseconds, not days; 'ms' is milliseconds, not minutes."""
    assert parse_duration("10ds") == SECOND
    assert parse_duration("10d") == 10 * 86_400 * SECOND
    assert parse_duration("10ms") == 10_000_000
    assert parse_duration("10m") == 600 * SECOND


def test_nanoseconds_keep_full_resolution() -> None:
    """Sub-microsecond values are not rounded."""
    assert parse_duration("1ns") == 1
    assert parse_duration("1500ns") == 1_500
    assert parse_duration("1500ns") != parse_duration("2us")


def test_minus_one_is_maximum_duration() -> None:
    """'-1' maps to the maximum representable duration."""
    assert parse_duration("-1") == MAX_DURATION
    assert MAX_DURATION == (2**64) * SECOND - 1


def test_empty_value_is_rejected() -> None:
    with pytest.raises(InvalidDurationError, match=ERR_NEED_DURATION):
        parse_duration("")


def test_unknown_suffix_is_rejected() -> None:
    with pytest.raises(InvalidDurationError, match=ERR_BAD_DURATION_SUFFIX):
        parse_duration("5x")


def test_suffix_must_match_exactly() -> None:
    """Trailing characters after a known suffix make it unknown."""
    with pytest.raises(InvalidDurationError, match=ERR_BAD_DURATION_SUFFIX):
        parse_duration("5sec")


@pytest.mark.parametrize("value", ["-2", "-5s", "s", "1.5s", " 5s", "abc", "+3"])
def test_non_integer_prefix_is_rejected(value: str) -> None:
    """The numeric part must be a non-negative decimal integer."""
    with pytest.raises(InvalidDurationError, match="invalid time duration value"):
        parse_duration(value)


def test_out_of_range_value_is_rejected() -> None:
    """Values beyond the maximum duration are reported as invalid."""
    with pytest.raises(InvalidDurationError, match="out of range"):
        parse_duration(f"{2**64}s")


def test_largest_whole_second_value_is_accepted() -> None:
    assert parse_duration(f"{2**64 - 1}s") == (2**64 - 1) * SECOND


def test_invalid_duration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_duration("")


def test_to_seconds() -> None:
    assert to_seconds(parse_duration("250ms")) == 0.25
    assert to_seconds(parse_duration("2s")) == 2.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2s", "2s"),
        ("1m", "60s"),
        ("1500ms", "1500ms"),
        ("7us", "7us"),
        ("1500ns", "1500ns"),
        ("0s", "0s"),
        ("-1", "max"),
    ],
)
def test_format_duration(value: str, expected: str) -> None:
    assert format_duration(parse_duration(value)) == expected


def test_format_duration_none() -> None:
    assert format_duration(None) == "none"
