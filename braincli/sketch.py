"""Token-budgeted context packages built from a context query."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .model import ContextQuery
from .state import AppState


@dataclass
class CodeSymbol:
    """A symbol in the project: function, struct, impl and so on."""

    id: str
    kind: str
    name: str
    file_path: str
    signature: str
    body_start_line: int
    body_end_line: int


@dataclass
class SymbolGraph:
    """All known symbols of a project."""

    symbols: list[CodeSymbol] = field(default_factory=list)


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def generate_context_package(state: AppState, query: ContextQuery) -> str:
    """Return the context package text for a query."""
    root = Path(state.project_root)
    graph = SymbolGraph()
    lines = [
        f"// CONTEXT QUERY: '{query.prompt}'",
        f"// TOKEN BUDGET: {query.token_budget}",
        f"// PROJECT ROOT: {_quoted(str(root))}",
        "---",
        "",
        "// HIERARCHICAL SEMANTIC SKETCH - PLACEHOLDER",
        "// Future: tree-sitter parsing and symbol graph traversal would happen here.",
        "// Based on the query, relevant code snippets would be selected.",
        f"// Example: Found {len(graph.symbols)} relevant symbols in project "
        f"{_quoted(root.name)}.",
    ]
    return "\n".join(lines) + "\n"