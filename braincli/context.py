"""Printing the working context for a task."""

from __future__ import annotations

from .loader import load_task_graph
from .model import BrainError
from .sketch import generate_context_package
from .state import AppState


def run(state: AppState, task_id: str) -> None:
    """Print the task header followed by its context."""
    task = load_task_graph(state.project_root).find(task_id)

    print(f"// Current Task: [{task.id}] {task.label}")
    if task.goal is not None:
        print(f"// Goal: {task.goal}")
    if task.acceptance_criteria is not None:
        print("\n// Acceptance Criteria:")
        for criterion in task.acceptance_criteria:
            print(f"// - {criterion.description}")
    print("\n---\n")

    if task.context_query is not None:
        try:
            package = generate_context_package(state, task.context_query)
        except BrainError as exc:
            raise BrainError(f"Failed to generate intelligent context package: {exc}") from exc
        print(package)
    elif task.context_files is not None:
        print("// LEGACY CONTEXT (static file list)\n")
        for file_path in task.context_files:
            print(f"// FILE: {file_path}")
            full_path = state.project_root / file_path
            try:
                print(full_path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as exc:
                print(f'// Error reading file "{full_path}": {exc}')
            print("\n---\n")
    else:
        print("// No context query or context files specified for this task.")