"""Lunar phase classification on the mean synodic month."""

from __future__ import annotations

import json
import logging
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Dict, Tuple

from .julian import datetime_to_julian_date

__all__ = [
    "EPOCH_NEW_MOON",
    "SYNODIC_MONTH",
    "PHASE_BOUNDARIES",
    "LunarPhase",
    "classify_phase_offset",
    "phase_from_julian_date",
    "phase_name",
    "phase_icon_key",
    "lunar_phase_at",
    "lunar_phase_tonight",
]

LOGGER = logging.getLogger(__name__)

# Julian Date of midnight on January 6, 2000; a new moon fell on that day.
EPOCH_NEW_MOON = 2451549.5

# Mean length of a lunation in days.
SYNODIC_MONTH = 29.530588853

# Upper bounds of buckets 0-7, in days into the cycle. Bucket 0 is the first
# half of New Moon, bucket 8 catches everything past the last bound and is
# read as New Moon again.
PHASE_BOUNDARIES: Tuple[float, ...] = (
    1.84566,
    5.53699,
    9.22831,
    12.91963,
    16.61096,
    20.30228,
    23.99361,
    27.86493,
)

NEW_MOON = 0

_PHASES: Dict[int, Tuple[str, str]] = {
    0: ("New Moon", "newMoon.svg"),
    1: ("Waxing Crescent Moon", "waxingCrescent.svg"),
    2: ("First Quarter Moon", "firstQuarter.svg"),
    3: ("Waxing Gibbous Moon", "waxingGibbous.svg"),
    4: ("Full Moon", "fullMoon.svg"),
    5: ("Waning Gibbous Moon", "waningGibbous.svg"),
    6: ("Last Quarter Moon", "lastQuarter.svg"),
    7: ("Waning Crescent Moon", "waningCrescent.svg"),
}

# Evaluation time on the following day for "tonight".
TONIGHT_TIME = time(12, 0, 0)


@dataclass(frozen=True)
class LunarPhase:
    """A classified point in the lunar cycle."""

    bucket: int
    name: str
    icon: str
    julian_date: float
    evaluated: datetime


def classify_phase_offset(offset: float) -> int:
    """Map *offset* days into the cycle onto bucket 0-8.

    Intervals are half-open: a value equal to a boundary belongs to the
    bucket above it.
    """

    return bisect_right(PHASE_BOUNDARIES, offset)


def phase_from_julian_date(julian_date: float) -> int:
    """Return the phase bucket (0-8) for *julian_date*.

    Buckets 0 and 8 both denote New Moon.
    """

    difference = julian_date - EPOCH_NEW_MOON - 1
    if difference < 0:
        difference += SYNODIC_MONTH

    # Python's float modulo floors, so the offset lands in [0, SYNODIC_MONTH)
    # even when one correction was not enough.
    offset = difference % SYNODIC_MONTH
    bucket = classify_phase_offset(offset)
    LOGGER.debug(
        json.dumps(
            {
                "event": "phase_classified",
                "julian_date": julian_date,
                "offset_days": offset,
                "bucket": bucket,
            }
        )
    )
    return bucket


def phase_name(bucket: int) -> str:
    return _PHASES.get(bucket, _PHASES[NEW_MOON])[0]


def phase_icon_key(bucket: int) -> str:
    return _PHASES.get(bucket, _PHASES[NEW_MOON])[1]


def lunar_phase_at(dt: datetime) -> LunarPhase:
    """Classify the calendar date and time of *dt*."""

    jd = datetime_to_julian_date(dt)
    bucket = phase_from_julian_date(jd)
    return LunarPhase(
        bucket=bucket,
        name=phase_name(bucket),
        icon=phase_icon_key(bucket),
        julian_date=jd,
        evaluated=dt,
    )


def lunar_phase_tonight(now: datetime) -> LunarPhase:
    """Phase for tonight, evaluated at noon of the calendar day after *now*.

    Parameters
    ----------
    now:
        The caller's current date and time. It is never converted between
        zones; only its calendar date matters.
    """

    tomorrow = (now + timedelta(days=1)).date()
    return lunar_phase_at(datetime.combine(tomorrow, TONIGHT_TIME))
