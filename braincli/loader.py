"""Loading of the project's task graph."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .model import BrainError, TaskGraph


def tasks_path(project_root: str | PathLike) -> Path:
    """Return the location of tasks.yaml under the project root."""
    return Path(project_root) / "docs" / "state" / "tasks.yaml"


def load_task_graph(project_root: str | PathLike) -> TaskGraph:
    """Read and parse the project's tasks.yaml."""
    path = tasks_path(project_root)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BrainError(f"Failed to read task graph at {path}: {exc}") from exc
    try:
        return TaskGraph.from_yaml(content)
    except BrainError as exc:
        raise BrainError(f"Failed to parse YAML from {path}: {exc}") from exc