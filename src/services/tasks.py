"""
Creation of one Todoist task per reminder date.
"""

import sys
from datetime import date

from core.config import (
    TASK_DUE_TIME,
    TASK_DURATION,
    TASK_DURATION_UNIT,
    TASK_JOINER,
    TASK_LABEL,
    TASK_PRIORITY,
    TASK_SUFFIX,
)
from core.errors import RemoteError
from core.todoist_client import TodoistClient
from models.events import TaskCreationResult


def build_task_content(bins: list[str]) -> str:
    """'Bio && Papier wegbringen'"""
    return f"{TASK_JOINER.join(bins)} {TASK_SUFFIX}"


def build_due_string(due_date: date) -> str:
    """Natural language due string, resolved to a date and time by Todoist."""
    return f"{due_date.isoformat()} {TASK_DUE_TIME}"


def create_task(client: TodoistClient, due_date: date, bins: list[str], project_id: str) -> TaskCreationResult:
    """Create the task for one date; failures are returned, not raised."""
    content = build_task_content(bins)
    try:
        task = client.create_task(
            content=content,
            due_string=build_due_string(due_date),
            project_id=project_id,
            priority=TASK_PRIORITY,
            duration=TASK_DURATION,
            duration_unit=TASK_DURATION_UNIT,
            labels=[TASK_LABEL],
        )
    except RemoteError as e:
        return TaskCreationResult(due_date=due_date, content=content, error=str(e))

    due = getattr(task, "due", None)
    remote_due = str(due.date) if due is not None else None
    return TaskCreationResult(due_date=due_date, content=task.content, remote_due=remote_due)


def create_tasks(grouped: dict[date, list[str]], project_id: str, client: TodoistClient) -> int:
    """
    Create one task per date in mapping order.

    Every date gets exactly one attempt. A failed call is reported and the
    loop moves on; the return value counts the calls that succeeded.
    """
    task_count = 0

    for due_date, bins in grouped.items():
        result = create_task(client, due_date, bins, project_id)
        if result.ok:
            print(f'Task: "{result.content}" Due: {result.remote_due} created')
            task_count += 1
        else:
            print(
                f"Failed creating task '{due_date.isoformat()}': {result.error}",
                file=sys.stderr,
            )

    return task_count
