from pathlib import Path

import pytest
import yaml

from braincli.conclude import run
from braincli.db import Connection
from braincli.loader import load_task_graph, tasks_path
from braincli.manifest import read_manifest, text_hash
from braincli.model import BrainError, TaskNotFoundError
from braincli.state import AppState

TASKS = [
    {"id": "T1", "label": "First task", "status": "completed", "needs": []},
    {"id": "T2", "label": "Second task", "status": "pending", "needs": ["T1"]},
]


def make_state(root: Path, tasks=TASKS) -> AppState:
    (root / "BRAIN.md").write_text("brain\n")
    path = tasks_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump({"version": 1, "tasks": tasks}))
    return AppState(project_root=root, db_conn=Connection(path=root / ".brain_db.sqlite3"))


def test_marks_task_completed(tmp_path):
    state = make_state(tmp_path)
    run(state, "T2")
    graph = load_task_graph(tmp_path)
    assert [t.status for t in graph.tasks] == ["completed", "completed"]


def test_other_fields_preserved(tmp_path):
    state = make_state(tmp_path)
    run(state, "T2")
    task = load_task_graph(tmp_path).find("T2")
    assert task.label == "Second task"
    assert task.needs == ["T1"]


def test_manifest_hash_matches_written_file(tmp_path):
    state = make_state(tmp_path)
    run(state, "T2")
    content = tasks_path(tmp_path).read_text(encoding="utf-8")
    assert read_manifest(tmp_path).tasks_yaml_sha256 == text_hash(content)


def test_no_temporary_file_left(tmp_path):
    state = make_state(tmp_path)
    run(state, "T2")
    leftovers = list(tasks_path(tmp_path).parent.glob("*.tmp"))
    assert leftovers == []


def test_reports_update(tmp_path, capsys):
    state = make_state(tmp_path)
    run(state, "T2")
    out = capsys.readouterr().out
    assert "Updated status for task ['T2'] to 'completed'." in out
    assert "Successfully saved changes to tasks.yaml." in out


def test_unknown_task_raises_and_leaves_file(tmp_path):
    state = make_state(tmp_path)
    before = tasks_path(tmp_path).read_text()
    with pytest.raises(TaskNotFoundError):
        run(state, "NOPE")
    assert tasks_path(tmp_path).read_text() == before


def test_missing_task_file_raises(tmp_path):
    state = AppState(project_root=tmp_path, db_conn=Connection(path=tmp_path / "db"))
    with pytest.raises(BrainError, match="Failed to read task graph"):
        run(state, "T1")