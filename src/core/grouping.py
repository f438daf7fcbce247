"""
Grouping of pickup events into one task per reminder date.
"""

from datetime import date

from models.events import PickupEvent


def group_by_date(events: list[PickupEvent]) -> dict[date, list[str]]:
    """
    Collect bin names per reminder date.

    Dates keep the order in which they are first seen; bins keep input order,
    duplicates included.
    """
    grouped: dict[date, list[str]] = {}
    for event in events:
        grouped.setdefault(event.reminder_date, []).append(event.bin)
    return grouped
