import pytest

from jadwaldokter.models import Doctor
from jadwaldokter.roster import Roster
from jadwaldokter.storage import (
    format_doctors,
    load_roster,
    parse_doctors,
    save_roster,
)

HEADER = ["id", "nama", "spesialisasi", "max_shift", "preferensi"]
CSV_LINES = [
    "id,nama,spesialisasi,max_shift,preferensi\n",
    "1,dr. Siti,Anak,5,Pagi\n",
    "2,dr. Budi,Bedah,4,Siang\n",
]


def test_parse_reads_header_and_rows():
    header, doctors = parse_doctors(CSV_LINES)
    assert header == HEADER
    assert doctors == [
        Doctor(1, "dr. Siti", "Anak", 5, "Pagi"),
        Doctor(2, "dr. Budi", "Bedah", 4, "Siang"),
    ]


def test_parse_stops_at_short_line():
    lines = CSV_LINES[:2] + ["\n"] + CSV_LINES[2:]
    _, doctors = parse_doctors(lines)
    assert [d.id for d in doctors] == [1]


def test_parse_handles_missing_trailing_newline_and_crlf():
    lines = [
        "id,nama,spesialisasi,max_shift,preferensi\r\n",
        "3,dr. Rina,Umum,2,Malam",
    ]
    _, doctors = parse_doctors(lines)
    assert doctors == [Doctor(3, "dr. Rina", "Umum", 2, "Malam")]


def test_parse_non_numeric_fields_become_zero():
    lines = [CSV_LINES[0], "x,dr. Andi,Umum,abc,Pagi\n"]
    _, doctors = parse_doctors(lines)
    assert doctors[0].id == 0
    assert doctors[0].max_shift == 0


def test_parse_empty_input_raises():
    with pytest.raises(ValueError):
        parse_doctors([])


def test_parse_incomplete_row_raises():
    with pytest.raises(ValueError):
        parse_doctors([CSV_LINES[0], "1,dr. Siti,Anak\n"])


def test_format_matches_input_lines():
    _, doctors = parse_doctors(CSV_LINES)
    assert format_doctors(HEADER, doctors) == "".join(CSV_LINES)


def test_format_requires_full_header():
    with pytest.raises(ValueError):
        format_doctors(HEADER[:3], [])


def test_format_then_parse_round_trip():
    doctors = [
        Doctor(4, "dr. Tono", "Umum", 6, "Malam"),
        Doctor(9, "dr. Lia", "Anak", 1, "Siang"),
    ]
    text = format_doctors(HEADER, doctors)
    header, parsed = parse_doctors(text.splitlines(keepends=True))
    assert header == HEADER
    assert parsed == doctors


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "data_dokter.csv"
    roster = Roster([Doctor(1, "dr. Siti", "Anak", 5, "Pagi")], HEADER)
    roster.add("dr. Budi", "Bedah", 4, "Siang")
    save_roster(path, roster)

    loaded = load_roster(path)
    assert loaded.header == HEADER
    assert list(loaded) == list(roster)
    assert path.read_text(encoding="utf-8") == "".join(CSV_LINES)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_roster(tmp_path / "missing.csv")