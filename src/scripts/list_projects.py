#!/usr/bin/env python3
"""
List all Todoist projects with their IDs.

Usage:
    uv run python src/scripts/list_projects.py
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.todoist_client import get_todoist_client
from services.projects import list_projects


def main():
    """List all projects."""
    client = get_todoist_client()

    print("Fetching projects from Todoist...\n")
    projects = list_projects(client)

    print(f"Found {len(projects)} projects\n")
    print("=" * 80)

    for project in projects:
        print(f"{project['name']}")
        print(f"  ID: {project['id']}")

    print("-" * 80)
    print("\nDone!")


if __name__ == "__main__":
    main()
