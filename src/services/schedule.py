"""
Schedule parsing for CSV exports and iCalendar files.

Both parsers return the same list of PickupEvent so the rest of the pipeline
does not care where the schedule came from. The two bin tables differ because
the two sources label their bins differently.
"""

import csv
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Callable

from icalendar import Calendar

from core.classification import classify
from core.config import (
    CSV_BIN_ALIASES,
    CSV_BINS,
    CSV_CATEGORY_FIELD,
    CSV_DATE_FIELD,
    CSV_DATE_FORMAT,
    CSV_DELIMITER,
    CSV_ENCODING,
    ICS_BINS,
    ICS_SUFFIXES,
)
from core.console import print_note
from core.errors import InvalidDateError, MalformedRecordError
from models.events import PickupEvent

Parser = Callable[..., list[PickupEvent]]


# =============================================================================
# CSV
# =============================================================================


def parse_collection_date(value: str) -> date:
    """Parse a dd.mm.yyyy collection date."""
    try:
        return datetime.strptime(value.strip(), CSV_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(
            f"date string: {value!r} didn't resolve into a valid date"
        ) from e


def parse_csv(path: Path, today: date | None = None) -> list[PickupEvent]:
    """
    Read a semicolon separated schedule export.

    The reminder goes out the evening before collection, so every date is
    shifted back one day. Unknown bin types are collected and reported once
    at the end.
    """
    skipped_bins: dict[str, None] = {}
    relevant_events = []

    with open(path, encoding=CSV_ENCODING, newline="") as f:
        reader = csv.DictReader(f, delimiter=CSV_DELIMITER)
        for row in reader:
            if row.get(CSV_DATE_FIELD) is None or row.get(CSV_CATEGORY_FIELD) is None:
                columns = [key for key, value in row.items() if value is not None]
                raise MalformedRecordError(
                    f"csv line {reader.line_num} has not expected keys {columns}"
                )

            pickup_date = parse_collection_date(row[CSV_DATE_FIELD])
            reminder_date = pickup_date - timedelta(days=1)
            bin_name = row[CSV_CATEGORY_FIELD].strip()
            bin_name = CSV_BIN_ALIASES.get(bin_name, bin_name)

            if bin_name not in CSV_BINS:
                skipped_bins[bin_name] = None
                continue

            event = classify(bin_name, reminder_date, CSV_BINS, today)
            if event:
                relevant_events.append(event)

    print_note(f"Skipped bin types: {' & '.join(skipped_bins)}")
    return relevant_events


# =============================================================================
# ICALENDAR
# =============================================================================


def get_event_category(component) -> str:
    """Return the first word of a VEVENT summary."""
    summary = component.get("SUMMARY")
    if not isinstance(summary, str) or not summary.split():
        raise MalformedRecordError(f"event summary is not a plain string: {summary!r}")
    return summary.split()[0]


def get_event_date(component) -> date:
    """Calendar date of DTSTART in the timezone it is encoded in."""
    dtstart = component.get("DTSTART")
    if dtstart is None:
        raise MalformedRecordError(
            f"event {component.get('SUMMARY')!r} has no start date"
        )
    start = dtstart.dt
    if isinstance(start, datetime):
        return start.date()
    return start


def parse_ics(path: Path, today: date | None = None) -> list[PickupEvent]:
    """
    Read an iCalendar schedule.

    The events in these calendars already sit on the evening before
    collection, so the start date is used as the reminder date unchanged.
    """
    with open(path, "rb") as f:
        calendar = Calendar.from_ical(f.read())

    relevant_events = []
    for component in calendar.walk():
        if component.name != "VEVENT":
            print_note(f"skipping {component.name} component")
            continue

        bin_name = get_event_category(component)
        if bin_name not in ICS_BINS:
            print_note(f"skipping unknown bin {bin_name!r}")
            continue

        event = classify(bin_name, get_event_date(component), ICS_BINS, today)
        if event:
            relevant_events.append(event)

    return relevant_events


# =============================================================================
# FORMAT SELECTION
# =============================================================================

PARSERS: dict[str, Parser] = {
    "csv": parse_csv,
    "ics": parse_ics,
}


def detect_format(path: Path) -> str:
    """Pick the schedule format from the file suffix; CSV is the default."""
    if Path(path).suffix.lower() in ICS_SUFFIXES:
        return "ics"
    return "csv"


def get_parser(path: Path, file_format: str | None = None) -> Parser:
    """Return the parser for an explicit format or the detected one."""
    return PARSERS[file_format or detect_format(path)]
