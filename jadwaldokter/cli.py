"""Interactive menu for managing doctors and viewing their schedule."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from os import PathLike
from typing import TextIO

from . import display
from .models import Doctor, ScheduleEntry
from .roster import DoctorNotFoundError, DuplicateDoctorError, Roster
from .scheduler import build_schedule, total_violations
from .storage import load_roster, save_roster

DEFAULT_PATH = "data/data_dokter.csv"
_CLEAR = "\x1b[1;1H\x1b[2J"
_INVALID = "Pilihan tidak valid."
_NO_SCHEDULE = "Belum ada jadwal. Silakan buat dulu (menu 5)."
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "",
    "=== MENU ===",
    "1. Tambah Dokter",
    "2. Hapus Dokter",
    "3. Lihat Semua Dokter",
    "4. Ubah Data Dokter",
    "5. Buat Jadwal Bulanan",
    "6. Lihat Jadwal Bulanan",
    "7. Lihat Jadwal Mingguan",
    "8. Lihat Jadwal Harian",
    "9. Lihat Jadwal Berdasarkan ID Dokter",
    "0. Keluar",
)

_EDITABLE = (
    ("1", "nama", "Masukkan nama baru: "),
    ("2", "spesialisasi", "Masukkan spesialisasi baru: "),
    ("3", "max shift", "Masukkan max shift baru: "),
    ("4", "preferensi", "Masukkan preferensi baru: "),
)


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _is_yes(text: str) -> bool:
    return text.strip()[:1].lower() == "y"


class Session:
    """One run of the menu over a roster, reading answers line by line."""

    def __init__(
        self,
        roster: Roster,
        path: str | PathLike[str] = DEFAULT_PATH,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.roster = roster
        self.path = path
        self.schedule: list[ScheduleEntry] | None = None
        self.rng = None
        self._input = input_func if input_func is not None else input
        self._out = output if output is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        return self._input().rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        return _parse_int(self._ask(prompt))

    def _clear(self) -> None:
        self._out.write(_CLEAR)

    def _lookup(self, doctor_id: int | None) -> Doctor | None:
        if doctor_id is None:
            return None
        try:
            return self.roster.find(doctor_id)
        except DoctorNotFoundError:
            return None

    def _show_doctor(self, doctor: Doctor) -> None:
        self._say(f"1. Nama: {doctor.name}")
        self._say(f"2. Spesialisasi: {doctor.specialization}")
        self._say(f"3. Max shift: {doctor.max_shift}")
        self._say(f"4. Preferensi: {doctor.preference}")

    def run(self) -> None:
        """Show the menu and act on choices until the user quits or input ends."""
        actions = {
            "1": self._add,
            "2": self._remove,
            "3": self._list,
            "4": self._edit,
            "5": self._build,
            "6": self._show_month,
            "7": self._show_week,
            "8": self._show_day,
            "9": self._show_doctor_schedule,
        }
        try:
            while True:
                for line in _MENU:
                    self._say(line)
                choice = self._ask("Pilihan: ").strip()[:1]
                if choice == "0":
                    self._close()
                    return
                action = actions.get(choice)
                if action is None:
                    self._say(_INVALID)
                else:
                    action()
        except EOFError:
            return

    def _add(self) -> None:
        self._say("Masukkan data dokter baru :")
        name = self._ask("Nama : ")
        specialization = self._ask("Spesialis : ")
        max_shift = _parse_int(self._ask("Maximum shift : ")) or 0
        preference = self._ask("Preferensi : ")
        try:
            self.roster.add(name, specialization, max_shift, preference)
        except DuplicateDoctorError:
            self._say("Dokter tersebut telah ditambahkan")

    def _remove(self) -> None:
        self._clear()
        while True:
            self._say("0. Keluar")
            doctor_id = self._ask_int("Id dokter mana yang ingin dihapus : ")
            if doctor_id == 0:
                self._clear()
                return
            doctor = self._lookup(doctor_id)
            if doctor is None:
                self._clear()
                self._say("Id yang ditunjuk tidak ada")
                continue
            self._show_doctor(doctor)
            if not _is_yes(self._ask("Apakah data dokter tersebut ingin dihapus?(Y/N): ")):
                self._clear()
                self._say(f"Id {doctor_id} tidak jadi dihapus")
                continue
            self.roster.remove(doctor.id)
            self._clear()
            self._say(f"Id {doctor_id} berhasil dihapus")

    def _list(self) -> None:
        self._say("".join(f"{column} " for column in self.roster.header[:4]))
        for d in self.roster:
            self._say(f"{d.id} {d.name} {d.specialization} {d.max_shift} {d.preference}")

    def _edit(self) -> None:
        while True:
            self._say("0. Keluar")
            doctor_id = self._ask_int("Id dokter mana yang ingin diganti datanya : ")
            if doctor_id == 0:
                self._clear()
                return
            doctor = self._lookup(doctor_id)
            if doctor is None:
                self._clear()
                self._say("Id yang ditunjuk tidak ada")
                continue
            self._edit_fields(doctor)

    def _edit_fields(self, doctor: Doctor) -> None:
        while True:
            self._clear()
            self._say(f"Id dokter: {doctor.id}")
            self._say("0. Kembali")
            self._show_doctor(doctor)
            self._say()
            choice = self._ask("Data mana yang ingin diubah: ").strip().lower()
            if choice.startswith("0") or choice == "kembali":
                self._clear()
                return
            for digit, name, prompt in _EDITABLE:
                if choice.startswith(digit) or choice == name:
                    self._edit_field(doctor, name, prompt)
                    break

    def _edit_field(self, doctor: Doctor, name: str, prompt: str) -> None:
        answer = self._ask(prompt)
        value: str | int = answer
        if name == "max shift":
            parsed = _parse_int(answer)
            if parsed is None:
                self._say(_INVALID)
                return
            value = parsed
        self.roster.update(doctor.id, name, value)

    def _build(self) -> None:
        self._say()
        self._say("Membuat jadwal bulanan...")
        self.schedule = build_schedule(self.roster, self.rng)
        self._say(
            "total pelanggaran yang terjadi saat pembuatan jadwal: "
            f"{total_violations(self.roster)} pelanggaran."
        )
        self._say("Jadwal berhasil dibuat.")

    def _require_schedule(self) -> list[ScheduleEntry] | None:
        if self.schedule is None:
            self._say(_NO_SCHEDULE)
        return self.schedule

    def _print_table(self, text: str) -> None:
        self._out.write("\n" + text)

    def _show_month(self) -> None:
        schedule = self._require_schedule()
        if schedule is not None:
            self._print_table(display.format_month(schedule))

    def _show_week(self) -> None:
        schedule = self._require_schedule()
        if schedule is None:
            return
        week = self._ask_int("Masukkan minggu ke-: ")
        if week is None:
            self._say(_INVALID)
            return
        self._print_table(display.format_week(schedule, week))

    def _show_day(self) -> None:
        schedule = self._require_schedule()
        if schedule is None:
            return
        week = self._ask_int("Masukkan minggu ke-: ")
        day = self._ask_int("Masukkan hari ke-: ")
        self._print_day(lambda: display.format_day(schedule, week, day), week, day)

    def _print_day(self, render: Callable[[], str], week: int | None, day: int | None) -> None:
        if week is None or day is None:
            self._say(_INVALID)
            return
        try:
            text = render()
        except ValueError:
            self._say(_INVALID)
            return
        self._print_table(text)

    def _show_doctor_schedule(self) -> None:
        schedule = self._require_schedule()
        if schedule is None:
            return
        doctor_id = self._ask_int("Masukkan ID dokter: ")
        self._say("1. Lihat sebulan penuh")
        self._say("2. Lihat minggu tertentu")
        self._say("3. Lihat hari tertentu")
        choice = self._ask_int("Pilihan: ")
        if doctor_id is None:
            self._say(_INVALID)
        elif choice == 1:
            self._print_table(display.format_doctor_month(schedule, doctor_id))
        elif choice == 2:
            week = self._ask_int("Minggu ke-: ")
            if week is None:
                self._say(_INVALID)
            else:
                self._print_table(display.format_doctor_week(schedule, doctor_id, week))
        elif choice == 3:
            week = self._ask_int("Minggu ke-: ")
            day = self._ask_int("Hari ke-: ")
            self._print_day(
                lambda: display.format_doctor_day(schedule, doctor_id, week, day),
                week,
                day,
            )
        else:
            self._say(_INVALID)

    def _close(self) -> None:
        if _is_yes(self._ask("Apakah ingin menyimpan perubahan yang dilakukan? (Y/N)")):
            try:
                save_roster(self.path, self.roster)
            except OSError:
                self._say("File gagal dibuka!")
        self._say("Keluar...")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the roster file and run the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="jadwaldokter", description="Manage doctors and their monthly shifts."
    )
    parser.add_argument(
        "path", nargs="?", default=DEFAULT_PATH, help="CSV file holding the doctors"
    )
    args = parser.parse_args(argv)
    try:
        roster = load_roster(args.path)
    except (OSError, ValueError):
        print("File gagal dibuka!")
        roster = Roster()
    Session(roster, args.path).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())