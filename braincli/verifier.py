"""Checking a task's acceptance criteria and running the test suite."""

from __future__ import annotations

import os
import subprocess
import sys
from os import PathLike
from pathlib import Path

from .loader import load_task_graph
from .model import AcceptanceCriterion, BrainError
from .state import AppState

_CYAN = "36"
_GREEN = "32"
_RED = "31"
_YELLOW = "33"
_ITALIC = "3"


class VerificationError(BrainError):
    """Raised when a task fails verification."""


def _paint(text: str, code: str) -> str:
    if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def check_file_exists(path: str | PathLike) -> bool:
    """Return whether the path exists."""
    return Path(path).exists()


def check_text(path: str | PathLike, assertion: str | None, value: str | None) -> bool:
    """Check whether a file does or does not contain a string."""
    path = Path(path)
    if value is None:
        raise BrainError(f"'text_check' for file \"{path}\" requires a 'value' field.")
    if not path.exists():
        return assertion == "not_contains_string"

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BrainError(f"Failed to read {path}: {exc}") from exc
    contains = value in content

    if assertion == "not_contains_string":
        return not contains
    if assertion in (None, "contains_string"):
        return contains
    print("  " + _paint(f"SKIPPED (unknown assertion type: '{assertion}')", _YELLOW))
    return True


def perform_check(state: AppState, criterion: AcceptanceCriterion) -> bool:
    """Evaluate one acceptance criterion; unknown check types pass."""
    full_path = state.project_root / criterion.file
    if criterion.check_type == "file_exists":
        return check_file_exists(full_path)
    if criterion.check_type == "text_check":
        return check_text(full_path, criterion.assertion, criterion.value)
    print("  " + _paint(f"SKIPPED (unknown check type: '{criterion.check_type}')", _YELLOW))
    return True


def run(state: AppState, task_id: str) -> None:
    """Verify a task's acceptance criteria, then run `cargo test` in docs/scripts."""
    task = load_task_graph(state.project_root).find(task_id)
    print(_paint(f"\nVerifying task: [{task.id}] {task.label}", _CYAN))

    criteria = task.acceptance_criteria
    if not criteria:
        if task.status == "pending":
            raise VerificationError(
                f"FATAL: Task '{task.id}' is pending but has no acceptance criteria. "
                "The plan is incomplete or a parsing error occurred."
            )
        print(
            f"\nNo acceptance criteria to verify for this task (status: {task.status}). "
            "Verification skipped."
        )
        return

    all_passed = True
    for criterion in criteria:
        print(f"- Checking: {_paint(criterion.description, _ITALIC)}")
        try:
            passed = perform_check(state, criterion)
        except BrainError as exc:
            print("  " + _paint(f"ERROR: Check failed to execute: {exc}", _RED))
            all_passed = False
            continue
        if passed:
            print("  " + _paint("PASS", _GREEN))
        else:
            print("  " + _paint("FAIL", _RED))
            all_passed = False

    if not all_passed:
        raise VerificationError("One or more acceptance criteria failed.")

    print(
        "\nAll criteria checks passed. "
        + _paint("Proceeding to integration tests...", _CYAN)
    )
    print(f"- Checking: {_paint('`cargo test` executes successfully.', _ITALIC)}")

    scripts_dir = state.project_root / "docs" / "scripts"
    try:
        result = subprocess.run(["cargo", "test"], cwd=scripts_dir, capture_output=True)
    except OSError as exc:
        raise BrainError(f"Failed to execute 'cargo test' in {scripts_dir}: {exc}") from exc

    if result.returncode != 0:
        print("  " + _paint("FAIL: `cargo test` did not pass.", _RED))
        stdout = (result.stdout or b"").decode("utf-8", errors="replace")
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")
        print(f"\n--- `cargo test` STDOUT ---\n{stdout}")
        print(f"\n--- `cargo test` STDERR ---\n{stderr}")
        raise VerificationError("`cargo test` failed. Verification failed.")

    print("  " + _paint("PASS", _GREEN))
    print("\n" + _paint("All checks passed!", _GREEN))