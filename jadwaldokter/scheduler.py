"""Monthly shift scheduling for the doctor roster."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from .models import MAX_DOCTORS_PER_SHIFT, Doctor, ScheduleEntry

SHIFTS = ("Pagi", "Siang", "Malam")
SPECIALIZATIONS = ("Anak", "Umum", "Bedah")
WEEK_LENGTH = 7
DEFAULT_DAYS = 30


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def has_specialization(doctor: Doctor, specialization: str) -> bool:
    """Tell whether the doctor has exactly this specialization."""
    return doctor.specialization == specialization


def prefers(doctor: Doctor, shift: str) -> bool:
    """Tell whether the doctor prefers this shift."""
    return doctor.preference == shift


def has_shifts_left(doctor: Doctor) -> bool:
    """Tell whether the doctor can still take a shift this week."""
    return doctor.max_shift > 0


def total_violations(doctors: Iterable[Doctor]) -> int:
    """Sum the preference violations recorded on the doctors."""
    return sum(doctor.violations for doctor in doctors)


def _snapshot(doctor: Doctor) -> Doctor:
    """The identity of a doctor as it is listed on a shift."""
    return Doctor(doctor.id, doctor.name, doctor.specialization, 0, doctor.preference)


def _find(
    doctors: Sequence[Doctor], start: int, accept: Callable[[Doctor], bool]
) -> int | None:
    for index, doctor in enumerate(doctors[start:], start):
        if accept(doctor):
            return index
    return None


def _fill_shift(doctors: Sequence[Doctor], shift: str, random_id: int) -> list[Doctor]:
    """Pick the doctors for one shift, updating their counters."""
    assigned: list[Doctor] = []
    taken: set[int] = set()

    def take(doctor: Doctor, violation: bool) -> None:
        assigned.append(_snapshot(doctor))
        taken.add(doctor.id)
        doctor.max_shift -= 1
        if violation:
            doctor.violations += 1

    def specialist(specialization: str, check_preference: bool) -> Callable[[Doctor], bool]:
        return lambda doctor: (
            has_specialization(doctor, specialization)
            and doctor.id not in taken
            and (not check_preference or prefers(doctor, shift))
            and has_shifts_left(doctor)
        )

    def anyone(check_preference: bool) -> Callable[[Doctor], bool]:
        return lambda doctor: (
            doctor.id not in taken
            and (not check_preference or prefers(doctor, shift))
            and has_shifts_left(doctor)
        )

    # First pass: every slot must go to a doctor who prefers this shift.
    remaining = 0
    for slot in range(MAX_DOCTORS_PER_SHIFT):
        if slot < len(SPECIALIZATIONS):
            accept = specialist(SPECIALIZATIONS[slot], check_preference=True)
        else:
            accept = anyone(check_preference=True)
        index = _find(doctors, 0, accept)
        if index is None:
            remaining = MAX_DOCTORS_PER_SHIFT - slot
            break
        take(doctors[index], violation=False)
    else:
        return assigned

    # Second pass: ignore preferences, counting each pick as a violation.
    cursor = 0
    for step in range(remaining):
        if step < len(SPECIALIZATIONS):
            accept = specialist(SPECIALIZATIONS[step], check_preference=False)
        else:
            accept = anyone(check_preference=False)
        index = _find(doctors, cursor, accept)
        if index is None:
            cursor = len(doctors)
            continue
        take(doctors[index], violation=True)
        if step == len(SPECIALIZATIONS) - 1:
            cursor = next(
                (i for i, doctor in enumerate(doctors) if doctor.id == random_id),
                len(doctors),
            )
        elif step >= len(SPECIALIZATIONS) and index + 1 == len(doctors):
            cursor = 0
        else:
            cursor = index + 1
    return assigned


def build_schedule(
    doctors: Iterable[Doctor],
    rng: _IntSource | None = None,
    days: int = DEFAULT_DAYS,
) -> list[ScheduleEntry]:
    """Build a schedule of three shifts a day for the given number of days.

    Each doctor's ``max_shift`` is a weekly allowance, restored every seven
    days and once more when scheduling ends. Violations counted on the
    doctors are reset first and left in place afterwards.
    """
    if days < 0:
        raise ValueError(f"days must not be negative, got {days}")
    roster = list(doctors)
    source: _IntSource = random.Random() if rng is None else rng

    for doctor in roster:
        doctor.violations = 0
    weekly_allowance = [doctor.max_shift for doctor in roster]

    def restore_allowance() -> None:
        for doctor, allowance in zip(roster, weekly_allowance):
            doctor.max_shift = allowance

    schedule: list[ScheduleEntry] = []
    try:
        for day in range(1, days + 1):
            if (day - 1) % WEEK_LENGTH == 0:
                restore_allowance()
            for shift in SHIFTS:
                random_id = source.randint(1, len(roster)) if roster else -1
                schedule.append(
                    ScheduleEntry(day, shift, _fill_shift(roster, shift, random_id))
                )
    finally:
        restore_allowance()
    return schedule