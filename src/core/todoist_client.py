"""
Todoist client setup with lazy initialization.
"""

import requests
from todoist_api_python.api import TodoistAPI

from core.config import TODOIST_API_KEY
from core.errors import ConfigError, RemoteError
from models.events import Project


class TodoistClient:
    """Thin wrapper that turns Todoist transport failures into RemoteError."""

    def __init__(self, api: TodoistAPI):
        self.api = api

    def list_projects(self) -> list[Project]:
        """Fetch all projects, following pagination."""
        projects: list[Project] = []
        try:
            for page in self.api.get_projects():
                for project in page:
                    projects.append({"name": project.name, "id": project.id})
        except requests.RequestException as e:
            raise RemoteError(f"Fetching projects failed: {e}") from e
        return projects

    def create_task(
        self,
        content: str,
        due_string: str,
        project_id: str,
        priority: int,
        duration: int,
        duration_unit: str,
        labels: list[str],
    ):
        """Create a single task and return the Todoist task object."""
        try:
            return self.api.add_task(
                content=content,
                due_string=due_string,
                project_id=project_id,
                priority=priority,
                duration=duration,
                duration_unit=duration_unit,
                labels=labels,
            )
        except (requests.RequestException, TypeError, ValueError) as e:
            raise RemoteError(f"Creating task '{content}' failed: {e}") from e


_todoist_client: TodoistClient | None = None


def get_todoist_client() -> TodoistClient:
    """Get or create the Todoist client (lazy initialization)."""
    global _todoist_client
    if _todoist_client is None:
        if not TODOIST_API_KEY:
            raise ConfigError("TODOIST_API_KEY env var missing")
        _todoist_client = TodoistClient(TodoistAPI(TODOIST_API_KEY))
    return _todoist_client
