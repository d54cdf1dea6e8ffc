from __future__ import annotations

import json
from datetime import date, datetime, time

import pytest

from moonphase.phase import lunar_phase_at
from moonphase_cli import main, parse_time_argument


def test_parse_time_argument():
    assert parse_time_argument("12:00") == (12, 0, 0)
    assert parse_time_argument("23:59:58") == (23, 59, 58)
    with pytest.raises(ValueError):
        parse_time_argument("12")


def test_json_output_for_date(capsys):
    assert main(["--date", "2000-01-20", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["phase_id"] == 4
    assert payload["phase"] == "Full Moon"
    assert payload["julian_date"] == 2451564.5
    assert payload["time"] == "12:00:00"


def test_text_output_with_time(capsys):
    assert main(["--date", "2000-01-06", "--time", "12:00"]) == 0
    out = capsys.readouterr().out
    assert "2000-01-06 12:00:00" in out
    assert "New Moon (newMoon.svg)" in out


def test_tonight_by_default(capsys):
    assert main(["--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert 0 <= payload["phase_id"] <= 8
    assert payload["time"] == "12:00:00"


@pytest.mark.parametrize(
    "argv",
    [
        ["--date", "2000-01-06", "--time", "25:00"],
        ["--date", "2000-13-06"],
        ["--date", "2000-01-06", "--time", "noon"],
        ["--time", "12:00"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_tonight_echoes_evaluated_day(capsys):
    assert main(["--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    evaluated = datetime.combine(date.fromisoformat(payload["date"]), time(12, 0, 0))
    assert payload["phase_id"] == lunar_phase_at(evaluated).bucket
    assert payload["julian_date"] == lunar_phase_at(evaluated).julian_date
