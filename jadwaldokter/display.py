"""Text tables for viewing a schedule by month, week, day or doctor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import ScheduleEntry

DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

_BORDER = "+-----------+--------+----------------------+----------------------+"
_HEADER = "| Hari      | Shift  | Dokter               | Spesialis            |"
_SHORT_BORDER = "+-----------+--------+"
_SHORT_HEADER = "| Hari      | Shift  |"
_DAY_NOT_FOUND = (
    "| Tidak ada jadwal ditemukan untuk hari & minggu ini.         |",
    "+--------------------------------------------------------------+",
)
_DOCTOR_NOT_FOUND = "| Tidak ada jadwal ditemukan. |"


def day_name(day: int) -> str:
    """Name of the weekday for a day of the month, day 1 being Senin."""
    if day < 1:
        raise ValueError(f"day must be 1 or more, got {day}")
    return DAY_NAMES[(day - 1) % len(DAY_NAMES)]


def week_of(day: int) -> int:
    """Week of the month (from 1) that a day of the month falls in."""
    return (day - 1) // len(DAY_NAMES) + 1


def _render(lines: Iterable[str]) -> str:
    return "".join(line + "\n" for line in lines)


def _entry_rows(entry: ScheduleEntry, label: str) -> Iterator[str]:
    for position, doctor in enumerate(entry.doctors):
        first = position == 0
        yield (
            f"| {label if first else '':<9} | {entry.shift if first else '':<6} "
            f"| {doctor.name:<20} | {doctor.specialization:<20} |"
        )


def _full_table(title: str, entries: Iterable[ScheduleEntry]) -> list[str]:
    lines = [title, _BORDER, _HEADER, _BORDER]
    for entry in entries:
        lines.extend(_entry_rows(entry, day_name(entry.day)))
        lines.append(_BORDER)
    return lines


def format_month(schedule: Iterable[ScheduleEntry]) -> str:
    """Every shift of the schedule with its doctors."""
    return _render(_full_table("=== JADWAL DOKTER BULANAN ===", schedule))


def format_week(schedule: Iterable[ScheduleEntry], week: int) -> str:
    """The shifts of one week of the schedule."""
    entries = (entry for entry in schedule if week_of(entry.day) == week)
    return _render(_full_table(f"=== JADWAL DOKTER - MINGGU KE-{week} ===", entries))


def format_day(schedule: Iterable[ScheduleEntry], week: int, day: int) -> str:
    """The shifts of one day, given as week and day of the month."""
    label = day_name(day)
    lines = [
        f"=== JADWAL DOKTER - {label} (HARI KE-{day}, MINGGU KE-{week}) ===",
        _BORDER,
        _HEADER,
        _BORDER,
    ]
    found = False
    for entry in schedule:
        if week_of(entry.day) == week and entry.day == day:
            rows = list(_entry_rows(entry, label))
            found = found or bool(rows)
            lines.extend(rows)
            lines.append(_BORDER)
    if not found:
        lines.extend(_DAY_NOT_FOUND)
    return _render(lines)


def _doctor_table(title: str, entries: Iterable[ScheduleEntry], doctor_id: int) -> str:
    lines = [title, _SHORT_BORDER, _SHORT_HEADER, _SHORT_BORDER]
    rows = [
        f"| {day_name(entry.day):<9} | {entry.shift:<6} |"
        for entry in entries
        if entry.has_doctor(doctor_id)
    ]
    lines.extend(rows or [_DOCTOR_NOT_FOUND])
    lines.append(_SHORT_BORDER)
    return _render(lines)


def format_doctor_month(schedule: Iterable[ScheduleEntry], doctor_id: int) -> str:
    """Every shift one doctor works in the schedule."""
    return _doctor_table(
        f"=== JADWAL DOKTER ID {doctor_id} (1 BULAN) ===", schedule, doctor_id
    )


def format_doctor_week(
    schedule: Iterable[ScheduleEntry], doctor_id: int, week: int
) -> str:
    """The shifts one doctor works in one week."""
    entries = (entry for entry in schedule if week_of(entry.day) == week)
    return _doctor_table(
        f"=== JADWAL DOKTER ID {doctor_id} (MINGGU KE-{week}) ===", entries, doctor_id
    )


def format_doctor_day(
    schedule: Iterable[ScheduleEntry], doctor_id: int, week: int, day: int
) -> str:
    """The shifts one doctor works on one day."""
    label = day_name(day)
    entries = (
        entry
        for entry in schedule
        if week_of(entry.day) == week and entry.day == day
    )
    return _doctor_table(
        f"=== JADWAL DOKTER ID {doctor_id} (HARI {label} - MINGGU KE-{week}) ===",
        entries,
        doctor_id,
    )