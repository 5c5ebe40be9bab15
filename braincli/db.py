"""Project database connection; storage is currently disabled."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .model import BrainError

DB_FILE_NAME = ".brain_db.sqlite3"


class DatabaseError(BrainError):
    """Raised for database failures."""


@dataclass(frozen=True)
class Connection:
    """Handle for the project database."""

    path: Path


def open_db_connection(project_root: str | PathLike) -> Connection:
    """Return a connection handle for the project database."""
    print("[DB] WARNING: Database is disabled. Opening a dummy connection.", file=sys.stderr)
    db_path = Path(project_root) / DB_FILE_NAME
    print(f'[DB] Would have connected to: "{db_path}"', file=sys.stderr)
    return Connection(path=db_path)


def initialize_database(conn: Connection) -> None:
    """Prepare the schema; skipped while the database is disabled."""
    if not isinstance(conn, Connection):
        raise DatabaseError("initialize_database requires a database connection")
    print("[DB] WARNING: Database is disabled. Skipping schema initialization.", file=sys.stderr)