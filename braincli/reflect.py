"""Generating architecture decision records for tasks."""

from __future__ import annotations

import json

from .loader import load_task_graph
from .model import BrainError
from .state import AppState


def sanitize_label(label: str) -> str:
    """Turn a task label into a file-name-safe slug."""
    return label.lower().replace(" ", "_").replace("/", "").replace(":", "")


def run(state: AppState, task_id: str) -> None:
    """Print the reflector payload for a task and save an ADR for it."""
    task = load_task_graph(state.project_root).find(task_id)
    print(f"// Found task to reflect on: [{task.id}] {task.label}")

    payload = json.dumps(task.to_dict(), indent=2, ensure_ascii=False)
    print("\n// --- Reflector AI Payload (Source Material) ---")
    print(payload)
    print("// --- End of Payload ---")

    adr_content = (
        f"# ADR-{task.id} {task.label}\n\n"
        "This is a placeholder for the generated ADR content."
    )

    history_dir = state.project_root / "docs" / "history"
    try:
        history_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BrainError(f"Failed to create history directory at {history_dir}: {exc}") from exc
    output_path = history_dir / f"ADR-{task.id}_{sanitize_label(task.label)}.md"
    try:
        output_path.write_text(adr_content, encoding="utf-8")
    except OSError as exc:
        raise BrainError(f"Failed to write ADR to file at {output_path}: {exc}") from exc

    print("\n// Successfully generated placeholder ADR.")
    print(f'// Saved to: "{output_path}"')