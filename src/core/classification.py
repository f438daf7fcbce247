"""
Bin classification and reminder-date relevance.
"""

from datetime import date

from core.console import print_bin, print_note
from models.events import PickupEvent


def get_bin_color(label: str, bins: dict[str, str]) -> str | None:
    """Look up a bin label (case-sensitive); None if it is not a known bin."""
    return bins.get(label)


def is_relevant(reminder_date: date, today: date | None = None) -> bool:
    """A reminder is relevant from its own day on; today's reminders are kept."""
    if today is None:
        today = date.today()
    return reminder_date >= today


def classify(
    label: str, reminder_date: date, bins: dict[str, str], today: date | None = None
) -> PickupEvent | None:
    """
    Build a PickupEvent for a known bin whose reminder is not in the past.

    Unknown labels return None without output so callers can decide how to
    report them. Past reminders are echoed in gray and dropped.
    """
    color = get_bin_color(label, bins)
    if color is None:
        return None

    print_bin(label, color, reminder_date.isoformat())
    if not is_relevant(reminder_date, today):
        print_note(f"irrelevant past bin {reminder_date.isoformat()}")
        return None

    return PickupEvent(bin=label, reminder_date=reminder_date)
