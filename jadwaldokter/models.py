"""Core data types: doctors and schedule entries."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

MAX_DOCTORS_PER_SHIFT = 10


@dataclass
class Doctor:
    """A doctor on the roster."""

    id: int
    name: str
    specialization: str
    max_shift: int
    preference: str
    violations: int = 0

    def copy(self) -> "Doctor":
        """Return an independent copy of this doctor."""
        return dataclasses.replace(self)


@dataclass
class ScheduleEntry:
    """One shift on one day, with the doctors assigned to it."""

    day: int
    shift: str
    doctors: list[Doctor] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.doctors) > MAX_DOCTORS_PER_SHIFT:
            raise ValueError(
                f"a shift holds at most {MAX_DOCTORS_PER_SHIFT} doctors, "
                f"got {len(self.doctors)}"
            )

    def has_doctor(self, doctor_id: int) -> bool:
        """Tell whether the doctor with this id works this shift."""
        return any(doctor.id == doctor_id for doctor in self.doctors)