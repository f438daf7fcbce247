"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest
import requests

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.todoist_client import TodoistClient

CSV_HEADER = "Datum;Abfallart"


class FakeTodoistAPI:
    """Stands in for todoist_api_python.api.TodoistAPI."""

    def __init__(self, projects=None, failing_due=()):
        self.projects = projects if projects is not None else [
            SimpleNamespace(name="Inbox", id="100"),
            SimpleNamespace(name="Haushalt", id="200"),
        ]
        self.failing_due = set(failing_due)
        self.added = []

    def get_projects(self):
        # Paginated like the real client: an iterator of lists
        yield self.projects[:1]
        yield self.projects[1:]

    def add_task(self, **kwargs):
        self.added.append(kwargs)
        if kwargs["due_string"] in self.failing_due:
            raise requests.HTTPError("400 Client Error: Bad Request")
        due_date = kwargs["due_string"].split()[0]
        return SimpleNamespace(content=kwargs["content"], due=SimpleNamespace(date=due_date))


@pytest.fixture
def today():
    """Fixed 'now' for parser tests."""
    return date(2025, 2, 1)


@pytest.fixture
def fake_api():
    return FakeTodoistAPI()


@pytest.fixture
def client(fake_api):
    return TodoistClient(fake_api)


@pytest.fixture
def write_csv(tmp_path):
    """Write schedule rows as a latin-1 encoded export, header included."""

    def _write(*rows: str, header: str = CSV_HEADER, name: str = "schedule.csv") -> Path:
        path = tmp_path / name
        path.write_bytes("\n".join([header, *rows]).encode("iso-8859-1"))
        return path

    return _write


@pytest.fixture
def write_ics(tmp_path):
    """Wrap VEVENT/VTODO blocks into a calendar file."""

    def _write(*components: str, name: str = "schedule.ics") -> Path:
        lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//bin-reminders//tests//DE"]
        for component in components:
            lines.extend(component.strip().splitlines())
        lines.append("END:VCALENDAR")
        path = tmp_path / name
        path.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
        return path

    return _write


def vevent(summary: str | None, dtstart: str | None, uid: str = "1") -> str:
    """Build a VEVENT block; dtstart is the full property line value part."""
    lines = ["BEGIN:VEVENT", f"UID:{uid}", "DTSTAMP:20250101T000000Z"]
    if summary is not None:
        lines.append(f"SUMMARY:{summary}")
    if dtstart is not None:
        lines.append(f"DTSTART{dtstart}")
    lines.append("END:VEVENT")
    return "\n".join(lines)
