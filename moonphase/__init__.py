"""Lunar phase utilities for the Moonphase API."""

from .julian import (
    InvalidDateComponent,
    check_date_components,
    datetime_to_julian_date,
    gregorian_to_julian_date,
    julian_date,
    julian_day_number,
)
from .lines import LineSourceError, random_exclamation, random_line, random_quote
from .phase import (
    EPOCH_NEW_MOON,
    SYNODIC_MONTH,
    LunarPhase,
    classify_phase_offset,
    lunar_phase_at,
    lunar_phase_tonight,
    phase_from_julian_date,
    phase_icon_key,
    phase_name,
)

__all__ = [
    "EPOCH_NEW_MOON",
    "SYNODIC_MONTH",
    "InvalidDateComponent",
    "LineSourceError",
    "LunarPhase",
    "check_date_components",
    "classify_phase_offset",
    "datetime_to_julian_date",
    "gregorian_to_julian_date",
    "julian_date",
    "julian_day_number",
    "lunar_phase_at",
    "lunar_phase_tonight",
    "phase_from_julian_date",
    "phase_icon_key",
    "phase_name",
    "random_exclamation",
    "random_line",
    "random_quote",
]
