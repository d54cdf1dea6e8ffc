"""Gregorian calendar to Julian Date conversion."""

from __future__ import annotations

from datetime import datetime

__all__ = [
    "InvalidDateComponent",
    "check_date_components",
    "julian_day_number",
    "julian_date",
    "gregorian_to_julian_date",
    "datetime_to_julian_date",
]

SECONDS_PER_DAY = 86_400
MINUTES_PER_DAY = 1_440
HOURS_PER_DAY = 24

# Days between the March 1, 4801 BCE anchor and the Julian epoch.
_ANCHOR_CORRECTION = 32_045


class InvalidDateComponent(ValueError):
    """Raised when a calendar field lies outside its civil range."""


_COMPONENT_RANGES = (
    ("month", 1, 12),
    ("day", 1, 31),
    ("hour", 0, 23),
    ("minute", 0, 59),
    ("second", 0, 59),
)


def check_date_components(
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> None:
    """Validate calendar fields before handing them to the conversion functions.

    The conversion functions themselves accept any integers; this check is
    for callers that take fields from untrusted input.

    Raises
    ------
    InvalidDateComponent
        If any field falls outside its range.
    """

    values = {"month": month, "day": day, "hour": hour, "minute": minute, "second": second}
    for name, low, high in _COMPONENT_RANGES:
        value = values[name]
        if not low <= value <= high:
            raise InvalidDateComponent(f"{name} must be within {low}..{high} (got {value})")


def julian_day_number(month: int, day: int, year: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    Parameters
    ----------
    month:
        Month of the year (1-12).
    day:
        Day of the month (1-31).
    year:
        Astronomical year; zero and negative years are accepted.

    Returns
    -------
    int
        Whole days since the start of the Julian period.
    """

    # 1 for January and February, which count as months 10 and 11 of the
    # previous March-based year.
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    days_since_march = (153 * m + 2) // 5
    leap_days = y // 4 - y // 100 + y // 400

    return day + days_since_march + 365 * y + leap_days - _ANCHOR_CORRECTION


def julian_date(julian_day: int, hour: int, minute: int, second: int) -> float:
    """Add the fraction of day given by *hour*, *minute* and *second* to *julian_day*."""

    return (
        julian_day
        + hour / HOURS_PER_DAY
        + minute / MINUTES_PER_DAY
        + second / SECONDS_PER_DAY
    )


def gregorian_to_julian_date(
    month: int,
    day: int,
    year: int,
    hour: int,
    minute: int,
    second: int,
) -> float:
    return julian_date(julian_day_number(month, day, year), hour, minute, second)


def datetime_to_julian_date(dt: datetime) -> float:
    """Julian Date of the calendar fields of *dt*.

    Any tzinfo is ignored and microseconds are dropped; the caller decides
    which wall clock the fields belong to.
    """

    return gregorian_to_julian_date(dt.month, dt.day, dt.year, dt.hour, dt.minute, dt.second)
