"""
Todoist project lookup and selection.
"""

from core.todoist_client import TodoistClient
from models.events import Project
from services.prompts import select_one


def list_projects(client: TodoistClient) -> list[Project]:
    """Fetch the projects a task can be created in. RemoteError propagates."""
    return client.list_projects()


def pick_project(projects: list[Project]) -> Project | None:
    """Ask the operator for a project; None means nothing was selected."""
    if not projects:
        return None
    index = select_one([project["name"] for project in projects], "Pick a project")
    if index is None:
        return None
    return projects[index]
