"""Project state snapshots."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from .db import Connection, DatabaseError


@dataclass
class ScannedFileInfo:
    """A file recorded in a snapshot."""

    path: str
    hash: str
    size: int


@dataclass
class SnapshotRequest:
    """Parameters for creating a project snapshot."""

    parent_version_id: int | None = None
    task_id_completed: str | None = None
    description: str = ""
    files: list[ScannedFileInfo] = field(default_factory=list)


def create_project_snapshot(conn: Connection, request: SnapshotRequest) -> int:
    """Create a snapshot and return its version ID.

    Storage is disabled, so nothing is recorded and the ID is always 0.
    """
    if not isinstance(conn, Connection):
        raise DatabaseError("create_project_snapshot requires a database connection")
    print(
        "[SNAPSHOT] WARNING: Database is disabled. Snapshot creation skipped.",
        file=sys.stderr,
    )
    return 0