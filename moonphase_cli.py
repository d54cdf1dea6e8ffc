"""Command line front end printing the lunar phase for a date."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import UTC, date, datetime, time
from typing import Optional, Sequence, Tuple

from moonphase.julian import InvalidDateComponent, check_date_components
from moonphase.phase import LunarPhase, lunar_phase_at, lunar_phase_tonight


def parse_time_argument(arg: str) -> Tuple[int, int, int]:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into hour, minute and second."""

    parts = [p.strip() for p in arg.split(":")]
    if len(parts) not in (2, 3) or not all(parts):
        raise ValueError(f"expected HH:MM or HH:MM:SS, got {arg!r}")
    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    return hour, minute, second


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moonphase",
        description="Print the lunar phase for a date (default: tonight).",
    )
    parser.add_argument("--date", type=str, default=None, help="YYYY-MM-DD (default: tonight)")
    parser.add_argument("--time", type=str, default=None, help="HH:MM[:SS] (default: 12:00:00)")
    parser.add_argument("--json", action="store_true", help="Emit a JSON object")
    return parser


def _render(phase: LunarPhase, as_json: bool) -> str:
    evaluated = phase.evaluated
    if as_json:
        return json.dumps(
            {
                "date": evaluated.date().isoformat(),
                "time": evaluated.strftime("%H:%M:%S"),
                "julian_date": phase.julian_date,
                "phase_id": phase.bucket,
                "phase": phase.name,
                "icon": phase.icon,
            }
        )
    return f"{evaluated:%Y-%m-%d %H:%M:%S}  JD {phase.julian_date:.5f}  {phase.name} ({phase.icon})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    ns = parser.parse_args(argv)

    if ns.date is None:
        if ns.time is not None:
            parser.error("--time requires --date")
        now = datetime.now(UTC)
        phase = lunar_phase_tonight(now)
    else:
        try:
            day = date.fromisoformat(ns.date)
            hour, minute, second = parse_time_argument(ns.time) if ns.time else (12, 0, 0)
            check_date_components(day.month, day.day, hour, minute, second)
        except InvalidDateComponent as exc:
            parser.error(str(exc))
        except ValueError as exc:
            parser.error(f"invalid date/time: {exc}")
        phase = lunar_phase_at(datetime.combine(day, time(hour, minute, second)))

    print(_render(phase, ns.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
