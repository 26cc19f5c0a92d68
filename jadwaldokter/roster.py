"""The in-memory list of doctors and the edits made to it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from .models import Doctor

DEFAULT_HEADER = ("id", "nama", "spesialisasi", "max_shift", "preferensi")


class DoctorNotFoundError(LookupError):
    """No doctor has the requested id."""

    def __init__(self, doctor_id: int) -> None:
        super().__init__(f"no doctor with id {doctor_id}")
        self.doctor_id = doctor_id


class DuplicateDoctorError(ValueError):
    """A doctor with the same name is already on the roster."""

    def __init__(self, name: str) -> None:
        super().__init__(f"doctor {name!r} is already on the roster")
        self.name = name


class _Field(Enum):
    NAME = ("1", ("nama", "name"))
    SPECIALIZATION = ("2", ("spesialisasi", "specialization"))
    MAX_SHIFT = ("3", ("max shift", "max_shift"))
    PREFERENCE = ("4", ("preferensi", "preference"))

    @classmethod
    def parse(cls, text: str) -> "_Field":
        key = text.strip().lower()
        for member in cls:
            digit, names = member.value
            if key.startswith(digit) or key in names:
                return member
        raise ValueError(f"unknown doctor field: {text!r}")


class Roster:
    """An ordered collection of doctors together with the CSV header."""

    def __init__(
        self,
        doctors: Iterable[Doctor] = (),
        header: Iterable[str] | None = None,
    ) -> None:
        self.doctors: list[Doctor] = list(doctors)
        self.header: list[str] = list(header) if header is not None else list(DEFAULT_HEADER)

    def __iter__(self) -> Iterator[Doctor]:
        return iter(self.doctors)

    def __len__(self) -> int:
        return len(self.doctors)

    def find(self, doctor_id: int) -> Doctor:
        """Return the doctor with this id."""
        for doctor in self.doctors:
            if doctor.id == doctor_id:
                return doctor
        raise DoctorNotFoundError(doctor_id)

    def add(
        self, name: str, specialization: str, max_shift: int, preference: str
    ) -> Doctor:
        """Append a new doctor, numbered one past the last doctor's id."""
        if any(doctor.name == name for doctor in self.doctors):
            raise DuplicateDoctorError(name)
        new_id = self.doctors[-1].id + 1 if self.doctors else 1
        doctor = Doctor(new_id, name, specialization, int(max_shift), preference)
        self.doctors.append(doctor)
        return doctor

    def remove(self, doctor_id: int) -> Doctor:
        """Take the doctor with this id off the roster and return it."""
        doctor = self.find(doctor_id)
        self.doctors.remove(doctor)
        return doctor

    def update(self, doctor_id: int, field: str, value: str | int) -> Doctor:
        """Change one field of a doctor.

        The field is given by its menu number (1-4) or its name:
        nama, spesialisasi, max shift or preferensi.
        """
        doctor = self.find(doctor_id)
        match _Field.parse(field):
            case _Field.NAME:
                doctor.name = str(value)
            case _Field.SPECIALIZATION:
                doctor.specialization = str(value)
            case _Field.MAX_SHIFT:
                doctor.max_shift = int(value)
            case _Field.PREFERENCE:
                doctor.preference = str(value)
        return doctor