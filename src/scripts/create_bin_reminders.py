#!/usr/bin/env python3
"""
Create Todoist reminders from a waste collection schedule.

Reads a schedule (CSV export or iCalendar file), keeps the upcoming pickups,
groups them by reminder date and, after confirmation, creates one task per
date in the selected Todoist project.

Usage:
    uv run python src/scripts/create_bin_reminders.py <schedule_file> [--format csv|ics] [--dry-run]

Example:
    uv run python src/scripts/create_bin_reminders.py data/abfuhrkalender_2025.csv
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DRY_RUN_BIN
from core.console import print_alert
from core.errors import NoEventsError
from core.grouping import group_by_date
from core.todoist_client import get_todoist_client
from models.events import PickupEvent
from services.projects import list_projects, pick_project
from services.prompts import confirm
from services.schedule import PARSERS, get_parser
from services.tasks import create_tasks


def format_grouped_tasks(grouped: dict[date, list[str]]) -> str:
    """One line per reminder date for the confirmation overview."""
    return "\n".join(
        f"  {due_date.isoformat()}: {', '.join(bins)}" for due_date, bins in grouped.items()
    )


def run(file_path: Path, file_format: str | None = None, dry_run: bool = False) -> int:
    """Run the whole pipeline and return the process exit code."""
    client = get_todoist_client()

    parse = get_parser(file_path, file_format)
    relevant_events = parse(file_path)
    if not relevant_events:
        raise NoEventsError("No valid events found, maybe all events are in the past?")
    print(f"--- parsed {len(relevant_events)} events ---")

    print_alert(f"\n--- DRY_RUN: {dry_run} ---\n")

    projects = list_projects(client)
    print(f"fetched {len(projects)} projects")

    selected_project = pick_project(projects)
    if not selected_project:
        print("no project selected")
        return 0

    # A dry run creates a single task for today instead of the whole schedule
    if dry_run:
        events_to_create = [PickupEvent(bin=DRY_RUN_BIN, reminder_date=date.today())]
    else:
        events_to_create = relevant_events

    grouped = group_by_date(events_to_create)
    print("tasks to be created")
    print(format_grouped_tasks(grouped))

    confirmation = confirm(
        f'Creating {len(grouped)} Tasks in project "{selected_project["name"]}". Confirm?'
    )
    if not confirmation:
        print("Creation of tasks canceled.", file=sys.stderr)
        return 1

    task_count = create_tasks(grouped, selected_project["id"], client)
    print(f"Summary: {task_count} task(s) created")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create Todoist reminders from a waste collection schedule"
    )
    parser.add_argument(
        "schedule_file",
        type=Path,
        help="Path to the schedule export (.csv) or calendar (.ics)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(PARSERS),
        help="Schedule format. Detected from the file suffix if omitted.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Create a single test task for today instead of the parsed schedule",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    try:
        exit_code = run(args.schedule_file, args.format, args.dry_run)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
