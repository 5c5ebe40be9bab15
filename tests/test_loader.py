import pytest

from braincli.loader import load_task_graph, tasks_path
from braincli.model import BrainError

TASKS = """
version: 1
tasks:
  - id: FINAL-0-setup
    label: Set up the workspace
    status: completed
    needs: []
  - id: FINAL-1-add-deps
    label: Add dependencies
    status: pending
    needs: [FINAL-0-setup]
    contextQuery:
      prompt: "Add 'reqwest' and 'tokio' to the manifest."
      tokenBudget: 2000
"""


@pytest.fixture
def project(tmp_path):
    path = tasks_path(tmp_path)
    path.parent.mkdir(parents=True)
    path.write_text(TASKS, encoding="utf-8")
    return tmp_path


def test_tasks_path_location(tmp_path):
    assert tasks_path(tmp_path) == tmp_path / "docs" / "state" / "tasks.yaml"


def test_deserialize_camelcase_fields_correctly(project):
    graph = load_task_graph(project)
    task = graph.find("FINAL-1-add-deps")
    assert task.context_query is not None
    assert task.context_query.token_budget == 2000
    assert "Add 'reqwest'" in task.context_query.prompt


def test_missing_file_raises(tmp_path):
    with pytest.raises(BrainError, match="Failed to read task graph"):
        load_task_graph(tmp_path)


def test_bad_yaml_raises(project):
    tasks_path(project).write_text("version: 1\ntasks: [{id: x}]\n", encoding="utf-8")
    with pytest.raises(BrainError, match="Failed to parse YAML"):
        load_task_graph(project)