"""Selection of the tasks that are ready to start."""

from __future__ import annotations

from .loader import load_task_graph
from .model import Task, TaskGraph
from .state import AppState

_STARTABLE = frozenset({"pending", "todo"})


def _available(graph: TaskGraph) -> list[Task]:
    completed = {task.id for task in graph.tasks if task.status == "completed"}
    return [
        task
        for task in graph.tasks
        if task.status in _STARTABLE and all(dep in completed for dep in task.needs)
    ]


def get_next_tasks(state: AppState) -> list[Task]:
    """Return pending or todo tasks whose dependencies are all completed."""
    return _available(load_task_graph(state.project_root))


def run(state: AppState) -> None:
    """Print the tasks that can be started now."""
    tasks = get_next_tasks(state)
    if not tasks:
        print("No available tasks. All tasks are either completed or blocked.")
        return
    print("Available tasks:")
    for task in tasks:
        print(f"- [{task.id}] {task.label}")