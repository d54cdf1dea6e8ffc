from __future__ import annotations

from datetime import UTC, datetime

import erfa
import pytest

from moonphase.julian import (
    InvalidDateComponent,
    check_date_components,
    datetime_to_julian_date,
    gregorian_to_julian_date,
    julian_date,
    julian_day_number,
)


def _erfa_julian_day_number(year: int, month: int, day: int) -> int:
    # cal2jd returns the Julian Date at 0h split as (2400000.5, MJD).
    djm0, djm = erfa.cal2jd(year, month, day)
    return int(round(float(djm0) + float(djm) + 0.5))


@pytest.mark.parametrize(
    ("month", "day", "year", "expected"),
    [
        (1, 6, 2000, 2451550),
        (1, 1, 1970, 2440588),
        (1, 1, 2000, 2451545),
        (3, 1, 2000, 2451605),
        (10, 15, 1582, 2299161),
        (11, 24, -4713, 0),
    ],
)
def test_julian_day_number_reference_values(month, day, year, expected):
    assert julian_day_number(month, day, year) == expected


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [
        (-1000, 7, 4),
        (0, 1, 1),
        (1, 1, 1),
        (1600, 2, 29),
        (1900, 3, 1),
        (2024, 2, 29),
        (2100, 12, 31),
    ],
)
def test_julian_day_number_matches_erfa(year, month, day):
    assert julian_day_number(month, day, year) == _erfa_julian_day_number(year, month, day)


def test_julian_day_number_is_permissive():
    # Month 13 of 2000 reads as January 2001, day 32 of January as February 1.
    assert julian_day_number(13, 1, 2000) == julian_day_number(1, 1, 2001)
    assert julian_day_number(1, 32, 2000) == julian_day_number(2, 1, 2000)


def test_julian_date_noon_adds_half_day():
    jdn = julian_day_number(1, 6, 2000)
    assert julian_date(jdn, 12, 0, 0) == jdn + 0.5


def test_julian_date_fractions():
    assert julian_date(0, 6, 0, 0) == 0.25
    assert julian_date(0, 0, 1, 0) == pytest.approx(1 / 1440)
    assert julian_date(0, 0, 0, 1) == pytest.approx(1 / 86400)
    assert julian_date(10, 23, 59, 59) == pytest.approx(10 + 86399 / 86400)


def test_gregorian_to_julian_date_composes():
    assert gregorian_to_julian_date(1, 6, 2000, 12, 0, 0) == 2451550.5
    assert gregorian_to_julian_date(1, 20, 2000, 12, 0, 0) == 2451564.5


def test_datetime_to_julian_date_ignores_tzinfo():
    naive = datetime(2000, 1, 6, 12, 0, 0)
    aware = datetime(2000, 1, 6, 12, 0, 0, tzinfo=UTC)
    assert datetime_to_julian_date(naive) == datetime_to_julian_date(aware) == 2451550.5


def test_check_date_components_accepts_valid_fields():
    check_date_components(12, 31, 23, 59, 59)
    check_date_components(1, 1)


@pytest.mark.parametrize(
    ("fields", "name"),
    [
        ((0, 1, 0, 0, 0), "month"),
        ((13, 1, 0, 0, 0), "month"),
        ((1, 32, 0, 0, 0), "day"),
        ((1, 1, 24, 0, 0), "hour"),
        ((1, 1, 0, 60, 0), "minute"),
        ((1, 1, 0, 0, 60), "second"),
    ],
)
def test_check_date_components_rejects_out_of_range(fields, name):
    with pytest.raises(InvalidDateComponent, match=name):
        check_date_components(*fields)
