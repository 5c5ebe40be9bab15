from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from braincli.cli import build_parser, display_status_bar, main, run_command, run_repl
from braincli.db import Connection
from braincli.governor import get_budget_status
from braincli.loader import load_task_graph, tasks_path
from braincli.model import BrainError
from braincli.state import AppState

TASKS = [
    {"id": "T1", "label": "First task", "status": "completed", "needs": []},
    {"id": "T2", "label": "Second task", "status": "pending", "needs": ["T1"]},
]


def make_state(root: Path) -> AppState:
    (root / "BRAIN.md").write_text("brain\n")
    path = tasks_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump({"version": 1, "tasks": TASKS}))
    return AppState(project_root=root, db_conn=Connection(path=root / "db"))


@pytest.mark.parametrize(
    "argv, command",
    [
        (["context", "X"], "context"),
        (["c", "X"], "context"),
        (["v", "X"], "verify"),
        (["r", "X"], "reflect"),
        (["d", "X"], "conclude"),
        (["done", "X"], "conclude"),
    ],
)
def test_parser_aliases(argv, command):
    args = build_parser().parse_args(argv)
    assert args.command == command
    assert args.task_id == "X"


def test_parser_without_command():
    assert build_parser().parse_args([]).command is None


def test_parser_prompt_role():
    args = build_parser().parse_args(["p", "planner"])
    assert (args.command, args.role) == ("prompt", "planner")


def test_prompt_command_prints_file(tmp_path, capsys):
    state = make_state(tmp_path)
    prompts = tmp_path / "docs" / "prompts"
    prompts.mkdir(parents=True)
    (prompts / "planner.md").write_text("You plan things.")
    run_command(state, build_parser().parse_args(["prompt", "planner"]))
    assert capsys.readouterr().out == "You plan things.\n"


def test_prompt_command_missing_file(tmp_path):
    state = make_state(tmp_path)
    with pytest.raises(BrainError, match="Failed to read prompt file"):
        run_command(state, build_parser().parse_args(["prompt", "ghost"]))


def test_display_status_bar(capsys):
    display_status_bar()
    out = capsys.readouterr().out
    assert get_budget_status() in out.splitlines()


def test_repl_lists_tasks_and_runs_commands(tmp_path, capsys):
    state = make_state(tmp_path)
    with patch("builtins.input", side_effect=["next", "", "exit"]) as fake_input:
        run_repl(state)
    assert fake_input.call_count == 3
    out = capsys.readouterr().out
    assert "- [T2] Second task" in out
    assert "Available tasks:" in out


def test_repl_runs_conclude_and_stops_at_eof(tmp_path, capsys):
    state = make_state(tmp_path)
    with patch("builtins.input", side_effect=["done T2", EOFError()]):
        run_repl(state)
    assert load_task_graph(tmp_path).find("T2").status == "completed"
    assert "All tasks are completed or blocked." in capsys.readouterr().out


def test_repl_reports_errors_and_continues(tmp_path, capsys):
    state = make_state(tmp_path)
    with patch("builtins.input", side_effect=["context NOPE", "bogus", "exit"]) as fake_input:
        run_repl(state)
    assert fake_input.call_count == 3
    err = capsys.readouterr().err
    assert "Task ID 'NOPE' not found" in err
    assert "invalid choice" in err


def test_main_runs_command(tmp_path, monkeypatch, capsys):
    make_state(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["next"]) == 0
    assert "- [T2] Second task" in capsys.readouterr().out


def test_main_reports_failure(tmp_path, monkeypatch, capsys):
    make_state(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["context", "NOPE"]) == 1
    assert "Task ID 'NOPE' not found" in capsys.readouterr().err


def test_main_without_command_starts_shell(tmp_path, monkeypatch, capsys):
    make_state(tmp_path)
    monkeypatch.chdir(tmp_path)
    with patch("builtins.input", side_effect=["exit"]):
        assert main([]) == 0
    assert "Welcome to the BRAIN interactive shell." in capsys.readouterr().out