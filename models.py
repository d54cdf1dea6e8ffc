"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PhaseIcon(str, Enum):
    """Icon files shipped with the front end, one per phase."""

    new_moon = "newMoon.svg"
    waxing_crescent = "waxingCrescent.svg"
    first_quarter = "firstQuarter.svg"
    waxing_gibbous = "waxingGibbous.svg"
    full_moon = "fullMoon.svg"
    waning_gibbous = "waningGibbous.svg"
    last_quarter = "lastQuarter.svg"
    waning_crescent = "waningCrescent.svg"


class PhaseResponse(BaseModel):
    """Lunar phase payload for a date and time."""

    ok: bool = True
    date_value: date = Field(..., alias="date", description="Evaluated calendar date")
    time: str = Field(..., description="Evaluated time of day (HH:MM:SS)")
    julian_date: float = Field(..., description="Julian Date of the evaluated instant")
    phase_id: int = Field(..., ge=0, le=8, description="Phase bucket; 0 and 8 are New Moon")
    phase: str = Field(..., description="Human-readable phase name")
    icon: PhaseIcon = Field(..., description="Icon file for the phase")

    model_config = ConfigDict(populate_by_name=True)


class TonightResponse(PhaseResponse):
    """Tonight's phase with the page's greeting and quote."""

    exclamation: Optional[str] = Field(None, description="Random exclamation line")
    quote: Optional[str] = Field(None, description="Random quote line")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    strings_dir: str
    resources: List[str]


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
