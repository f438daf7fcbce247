"""Tests for the CSV schedule parser."""

from datetime import date

import pytest

from core.errors import InvalidDateError, MalformedRecordError
from models.events import PickupEvent
from services.schedule import parse_collection_date, parse_csv


def test_reminder_is_day_before_collection(write_csv, today):
    path = write_csv("01.03.2025;Bio")

    events = parse_csv(path, today=today)

    assert events == [PickupEvent(bin="Bio", reminder_date=date(2025, 2, 28))]
    assert events[0].reminder_date.isoformat() == "2025-02-28"


def test_reminder_crosses_month_and_year(write_csv, today):
    path = write_csv("01.01.2026;Papier")

    events = parse_csv(path, today=today)

    assert events[0].reminder_date == date(2025, 12, 31)


def test_unknown_bin_is_skipped_and_reported(write_csv, today, capsys):
    path = write_csv("01.03.2025;Sperrmüll", "08.03.2025;Sperrmüll", "15.03.2025;Bio")

    events = parse_csv(path, today=today)

    assert [e.bin for e in events] == ["Bio"]
    out = capsys.readouterr().out
    assert "Skipped bin types: Sperrmüll" in out
    assert "Sperrmüll & Sperrmüll" not in out


def test_bin_lookup_is_case_sensitive(write_csv, today):
    path = write_csv("01.03.2025;bio", "01.03.2025;PAPIER")

    assert parse_csv(path, today=today) == []


def test_latin1_labels_are_recognized(write_csv, today):
    path = write_csv("01.03.2025;Restmüll", "01.03.2025;Gelbe Tonne")

    events = parse_csv(path, today=today)

    assert [e.bin for e in events] == ["Restmüll", "Gelbe Tonne"]


def test_past_reminders_are_dropped(write_csv, today, capsys):
    path = write_csv("15.01.2025;Bio", "01.02.2025;Papier", "03.02.2025;Bio")

    events = parse_csv(path, today=today)

    assert events == [PickupEvent(bin="Bio", reminder_date=date(2025, 2, 2))]
    assert "irrelevant past bin 2025-01-14" in capsys.readouterr().out


def test_reminder_due_today_is_kept(write_csv, today):
    path = write_csv("02.02.2025;Bio")

    events = parse_csv(path, today=today)

    assert events == [PickupEvent(bin="Bio", reminder_date=today)]


def test_extra_columns_are_ignored(write_csv, today):
    path = write_csv(
        "Musterstraße;01.03.2025;Bio",
        header="Strasse;Datum;Abfallart",
    )

    assert len(parse_csv(path, today=today)) == 1


def test_missing_column_in_header_raises(write_csv, today):
    path = write_csv("01.03.2025;Bio", header="Datum;Tonne")

    with pytest.raises(MalformedRecordError, match="has not expected keys"):
        parse_csv(path, today=today)


def test_short_row_raises(write_csv, today):
    path = write_csv("01.03.2025;Bio", "08.03.2025")

    with pytest.raises(MalformedRecordError):
        parse_csv(path, today=today)


def test_invalid_date_raises(write_csv, today):
    path = write_csv("31.02.2025;Bio")

    with pytest.raises(InvalidDateError, match="31.02.2025"):
        parse_csv(path, today=today)


def test_iso_date_is_not_coerced():
    with pytest.raises(InvalidDateError):
        parse_collection_date("2025-03-01")


def test_header_only_file_yields_nothing(write_csv, today):
    path = write_csv()

    assert parse_csv(path, today=today) == []


def test_utf8_export_keeps_residual_waste(tmp_path, today, capsys):
    path = tmp_path / "schedule.csv"
    path.write_bytes("Datum;Abfallart\n01.03.2025;Restmüll\n".encode("utf-8"))

    events = parse_csv(path, today=today)

    assert events == [PickupEvent(bin="Restmüll", reminder_date=date(2025, 2, 28))]
    assert "RestmÃ¼ll" not in capsys.readouterr().out
