"""Application state shared by the commands."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .db import Connection, initialize_database, open_db_connection
from .model import BrainError

MARKER_FILE = "BRAIN.md"


def find_project_root(start_dir: str | PathLike) -> Path | None:
    """Return the nearest directory at or above start_dir holding BRAIN.md."""
    start = Path(start_dir)
    for candidate in (start, *start.parents):
        if (candidate / MARKER_FILE).exists():
            return candidate
    return None


@dataclass
class AppState:
    """The project root and its database connection."""

    project_root: Path
    db_conn: Connection

    @classmethod
    def create(cls, start_dir: str | PathLike | None = None) -> AppState:
        """Locate the project root from start_dir (default: cwd) and open the database."""
        start = Path.cwd() if start_dir is None else Path(start_dir).resolve()
        root = find_project_root(start)
        if root is None:
            raise BrainError(
                "Cannot find project root containing BRAIN.md from the current directory."
            )
        conn = open_db_connection(root)
        initialize_database(conn)
        return cls(project_root=root, db_conn=conn)