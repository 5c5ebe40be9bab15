"""Marking a task as completed and recording the new task graph state."""

from __future__ import annotations

import os
import sys

from .loader import load_task_graph, tasks_path
from .manifest import read_manifest, text_hash, write_manifest
from .model import BrainError
from .state import AppState
from .versioning import SnapshotRequest, create_project_snapshot


def run(state: AppState, task_id: str) -> None:
    """Mark a task completed, save tasks.yaml atomically and update the manifest."""
    path = tasks_path(state.project_root)
    graph = load_task_graph(state.project_root)

    task = graph.find(task_id)
    task.status = "completed"
    print(f"Updated status for task ['{task.id}'] to 'completed'.")

    try:
        updated_content = graph.to_yaml()
    except Exception as exc:
        raise BrainError(f"Failed to serialize updated task graph back to YAML: {exc}") from exc

    print("Atomically writing changes to tasks.yaml...")
    temp_path = path.with_name(path.name + ".tmp")
    try:
        temp_path.write_text(updated_content, encoding="utf-8")
    except OSError as exc:
        raise BrainError(f"Failed to write to temporary file {temp_path}: {exc}") from exc
    try:
        os.replace(temp_path, path)
    except OSError as exc:
        raise BrainError(f"Failed to rename temporary file to {path}: {exc}") from exc
    print("Successfully saved changes to tasks.yaml.")

    print("Updating .brain/manifest.json...")
    manifest = read_manifest(state.project_root)
    manifest.tasks_yaml_sha256 = text_hash(updated_content)
    write_manifest(state.project_root, manifest)
    print("Successfully updated manifest with new tasks.yaml hash.")

    print(f"Creating version snapshot for completed task '{task_id}'...")
    request = SnapshotRequest(
        parent_version_id=None,
        task_id_completed=task_id,
        description=f"Snapshot after completing task: {task_id}",
        files=[],
    )
    try:
        version_id = create_project_snapshot(state.db_conn, request)
    except BrainError as exc:
        print(f"Error creating version snapshot: {exc}", file=sys.stderr)
    else:
        print(f"[SNAPSHOT] Created version snapshot with ID: {version_id}")