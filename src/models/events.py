"""
Data models for pickup events, projects and task results.
"""

from dataclasses import dataclass
from datetime import date
from typing import TypedDict


@dataclass(frozen=True)
class PickupEvent:
    """A bin that has to go out on the evening of reminder_date."""
    bin: str
    reminder_date: date


class Project(TypedDict):
    """Todoist project reduced to what the picker needs."""
    name: str
    id: str


@dataclass
class TaskCreationResult:
    """Outcome of one task creation call."""

    due_date: date
    content: str
    remote_due: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
