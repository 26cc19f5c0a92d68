import random
from collections import Counter

import pytest

from jadwaldokter.models import Doctor
from jadwaldokter.scheduler import (
    build_schedule,
    has_shifts_left,
    has_specialization,
    prefers,
    total_violations,
)


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def morning_roster(max_shift=100):
    doctors = [
        Doctor(1, "dr. Siti", "Anak", max_shift, "Pagi"),
        Doctor(2, "dr. Budi", "Umum", max_shift, "Pagi"),
        Doctor(3, "dr. Ani", "Bedah", max_shift, "Pagi"),
    ]
    doctors.extend(
        Doctor(i, f"dr. Umum {i}", "Umum", max_shift, "Pagi") for i in range(4, 11)
    )
    return doctors


def ids(entry):
    return [doctor.id for doctor in entry.doctors]


def test_has_specialization():
    doctor = Doctor(1, "dr. Siti", "Anak", 5, "Pagi")
    assert has_specialization(doctor, "Anak") is True
    assert has_specialization(doctor, "Bedah") is False


def test_prefers():
    doctor = Doctor(1, "dr. Siti", "Anak", 5, "Pagi")
    assert prefers(doctor, "Pagi") is True
    assert prefers(doctor, "Malam") is False


def test_has_shifts_left():
    assert has_shifts_left(Doctor(1, "a", "Anak", 1, "Pagi")) is True
    assert has_shifts_left(Doctor(2, "b", "Anak", 0, "Pagi")) is False


def test_total_violations():
    doctors = [
        Doctor(1, "a", "Anak", 1, "Pagi", violations=2),
        Doctor(2, "b", "Umum", 1, "Pagi", violations=3),
    ]
    assert total_violations(doctors) == 5
    assert total_violations([]) == 0


def test_preferred_shift_is_filled_in_order():
    doctors = morning_roster()
    schedule = build_schedule(doctors, FixedRng(6), days=1)
    assert [(e.day, e.shift) for e in schedule] == [
        (1, "Pagi"),
        (1, "Siang"),
        (1, "Malam"),
    ]
    assert ids(schedule[0]) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_fallback_resumes_from_random_doctor():
    doctors = morning_roster()
    rng = FixedRng(6)
    schedule = build_schedule(doctors, rng, days=1)
    assert ids(schedule[1]) == [1, 2, 3, 6, 7, 8, 9, 10, 4, 5]
    assert ids(schedule[2]) == [1, 2, 3, 6, 7, 8, 9, 10, 4, 5]
    assert rng.calls == [(1, 10)] * 3


def test_violations_are_reset_and_counted():
    doctors = morning_roster()
    for doctor in doctors:
        doctor.violations = 5
    build_schedule(doctors, FixedRng(1), days=1)
    assert total_violations(doctors) == 20
    assert all(doctor.violations == 2 for doctor in doctors)


def test_allowance_is_restored_after_scheduling():
    doctors = morning_roster(max_shift=100)
    build_schedule(doctors, FixedRng(3), days=10)
    assert [doctor.max_shift for doctor in doctors] == [100] * 10


def test_weekly_allowance_resets_every_seven_days():
    doctors = [Doctor(1, "dr. Siti", "Anak", 2, "Pagi")]
    schedule = build_schedule(doctors, random.Random(0), days=8)
    expected = [[1], [1], []] + [[], [], []] * 6 + [[1], [1], []]
    assert [ids(entry) for entry in schedule] == expected
    assert total_violations(doctors) == 2
    assert doctors[0].max_shift == 2


def test_empty_roster_gives_empty_shifts():
    schedule = build_schedule([], FixedRng(1), days=2)
    assert [(e.day, e.shift, e.doctors) for e in schedule] == [
        (1, "Pagi", []),
        (1, "Siang", []),
        (1, "Malam", []),
        (2, "Pagi", []),
        (2, "Siang", []),
        (2, "Malam", []),
    ]


def test_default_is_thirty_days():
    schedule = build_schedule(morning_roster(), random.Random(1))
    assert len(schedule) == 90
    assert schedule[-1].day == 30
    assert schedule[-1].shift == "Malam"


def test_negative_days_rejected():
    with pytest.raises(ValueError):
        build_schedule(morning_roster(), FixedRng(1), days=-1)


def test_entries_hold_snapshots():
    doctors = morning_roster()
    schedule = build_schedule(doctors, FixedRng(1), days=1)
    listed = schedule[0].doctors[0]
    assert listed is not doctors[0]
    assert (listed.id, listed.name, listed.specialization, listed.preference) == (
        1,
        "dr. Siti",
        "Anak",
        "Pagi",
    )
    assert listed.max_shift == 0
    doctors[0].name = "dr. Lain"
    assert schedule[0].doctors[0].name == "dr. Siti"


@pytest.mark.parametrize("seed", [0, 1, 2, 7, 42])
def test_schedule_respects_weekly_allowance(seed):
    specs = ["Anak", "Umum", "Bedah"]
    shifts = ["Pagi", "Siang", "Malam"]
    doctors = [
        Doctor(i, f"dr. {i}", specs[i % 3], 3 + i % 3, shifts[(i // 3) % 3])
        for i in range(1, 13)
    ]
    allowance = {doctor.id: doctor.max_shift for doctor in doctors}
    schedule = build_schedule(doctors, random.Random(seed), days=30)

    assert len(schedule) == 90
    for entry in schedule:
        entry_ids = ids(entry)
        assert len(entry_ids) <= 10
        assert len(entry_ids) == len(set(entry_ids))

    weekly = Counter()
    for entry in schedule:
        week = (entry.day - 1) // 7
        for doctor_id in ids(entry):
            weekly[(week, doctor_id)] += 1
    for (_, doctor_id), count in weekly.items():
        assert count <= allowance[doctor_id]
    assert {d.id: d.max_shift for d in doctors} == allowance