# jadwaldokter

Build a shift roster for a small team of doctors, then view it by month,
week, day, or for one doctor. Menu text and table headings are in
Indonesian.

Doctors are kept in a CSV file with a header line and one doctor per line:

```
id,nama,spesialisasi,max_shift,preferensi
1,dr. Siti,Anak,5,Pagi
2,dr. Budi,Bedah,5,Siang
3,dr. Rina,Umum,4,Malam
```

- `spesialisasi` is matched against `Anak`, `Umum` and `Bedah`.
- `max_shift` is how many shifts the doctor may take in one week.
- `preferensi` is the preferred shift: `Pagi`, `Siang` or `Malam`.

Reading stops at the first line with fewer than three columns; a line with
three or four columns, or an empty file, raises `ValueError`.

## Installing

```
pip install .
```

## The interactive menu

```
jadwaldokter [PATH]
```

With no argument the roster is read from `data/data_dokter.csv`. If the file
cannot be read, `File gagal dibuka!` is printed and the menu starts with an
empty roster.

The menu offers:

1. add a doctor (ids continue from the last doctor's id; a name already on
   the roster is refused),
2. remove doctors by id, with confirmation,
3. list all doctors,
4. edit a doctor's name, specialization, weekly shift limit or preference,
5. build a 30-day schedule and report the number of preference violations,
6. to 9. show the schedule for the month, a week, a day, or one doctor
   (by month, week or day).

Choosing `0` asks whether to save the roster back to the CSV file, then
quits. If input ends, the menu quits without saving.

## How the schedule is built

`scheduler.build_schedule(doctors, rng=None, days=30)` returns a list of
`ScheduleEntry` objects, three per day (`Pagi`, `Siang`, `Malam`), each with
at most ten doctors.

Each doctor's `max_shift` is a weekly allowance, restored every seven days.
For every shift the scheduler first looks, in roster order, for an `Anak`,
an `Umum` and a `Bedah` doctor who prefer that shift and have shifts left,
then fills further places with any other doctor who prefers it. As soon as a
place cannot be filled that way, the remaining places are filled from doctors
not yet on the shift who have shifts left, regardless of preference; each
such pick adds one to that doctor's `violations`. `rng` is any object with a
`randint(a, b)` method (a `random.Random` by default) and influences where
that second search resumes.

Violations are reset at the start and left on the doctors afterwards;
`max_shift` values are restored when scheduling ends.
`scheduler.total_violations(doctors)` sums them.

## Using it from Python

```python
import random

from jadwaldokter.storage import load_roster, save_roster
from jadwaldokter.scheduler import build_schedule, total_violations
from jadwaldokter.display import format_week, format_doctor_month

roster = load_roster("data/data_dokter.csv")
roster.add("dr. Andi", "Umum", 5, "Malam")

schedule = build_schedule(list(roster), random.Random(7), 30)
print(format_week(schedule, 1))
print(format_doctor_month(schedule, 1))
print(total_violations(roster))

save_roster("data/data_dokter.csv", roster)
```

The modules:

- `jadwaldokter.models`: the `Doctor` and `ScheduleEntry` dataclasses.
- `jadwaldokter.roster`: `Roster`, with `find`, `add`, `remove` and `update`
  (field by menu number `1`-`4` or by name `nama`, `spesialisasi`,
  `max shift`, `preferensi`), raising `DoctorNotFoundError` or
  `DuplicateDoctorError`.
- `jadwaldokter.storage`: `parse_doctors`, `format_doctors`, `load_roster`,
  `save_roster`.
- `jadwaldokter.scheduler`: `build_schedule`, `total_violations`,
  `has_specialization`, `prefers`, `has_shifts_left`.
- `jadwaldokter.display`: `day_name`, `week_of`, `format_month`,
  `format_week`, `format_day`, `format_doctor_month`, `format_doctor_week`,
  `format_doctor_day`, each returning the table as a string.
- `jadwaldokter.cli`: `Session` and `main`.

## What it does not do

- The schedule lives only in memory; it is not saved to a file.
- Days are numbered 1 to 30 with no calendar: day 1 is always `Senin`.
- There are no user accounts or logins; anyone running the menu can edit the
  roster.

## Running the tests

```
pip install ".[test]"
pytest
```