"""Reading and writing the doctor roster as CSV."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike

from .models import Doctor
from .roster import Roster

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MIN_COLUMNS = 3
_COLUMNS = 5


def _to_int(text: str) -> int:
    """Read the leading integer of a field, 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _split(line: str) -> list[str]:
    return line.replace("\n", "").replace("\r", "").split(",")


def parse_doctors(lines: Iterable[str]) -> tuple[list[str], list[Doctor]]:
    """Parse CSV lines into the header and the doctors.

    Reading stops at the first line with fewer than three columns.
    """
    rows = iter(lines)
    try:
        header = _split(next(rows))
    except StopIteration:
        raise ValueError("doctor file is empty") from None

    doctors: list[Doctor] = []
    for number, line in enumerate(rows, start=2):
        fields = _split(line)
        if len(fields) < _MIN_COLUMNS:
            break
        if len(fields) < _COLUMNS:
            raise ValueError(
                f"line {number}: expected {_COLUMNS} columns, got {len(fields)}"
            )
        doctor_id, name, specialization, max_shift, preference = fields[:_COLUMNS]
        doctors.append(
            Doctor(
                _to_int(doctor_id),
                name,
                specialization,
                _to_int(max_shift),
                preference,
            )
        )
    return header, doctors


def format_doctors(header: Iterable[str], doctors: Iterable[Doctor]) -> str:
    """Render the header and doctors as CSV text."""
    columns = list(header)[:_COLUMNS]
    if len(columns) < _COLUMNS:
        raise ValueError(f"header needs {_COLUMNS} columns, got {len(columns)}")
    lines = [",".join(columns)]
    lines.extend(
        f"{d.id},{d.name},{d.specialization},{d.max_shift},{d.preference}"
        for d in doctors
    )
    return "".join(line + "\n" for line in lines)


def load_roster(path: str | PathLike[str]) -> Roster:
    """Read a roster from a CSV file."""
    with open(path, encoding="utf-8") as handle:
        header, doctors = parse_doctors(handle)
    return Roster(doctors, header)


def save_roster(path: str | PathLike[str], roster: Roster) -> None:
    """Write a roster to a CSV file, replacing its contents."""
    text = format_doctors(roster.header, roster)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)