"""Reading and writing .brain/manifest.json, and content hashing."""

from __future__ import annotations

import hashlib
import json
import os
import sys
from os import PathLike
from pathlib import Path

from .model import BrainError, Manifest


def manifest_path(project_root: str | PathLike) -> Path:
    """Return the manifest location, creating the .brain directory if needed."""
    brain_dir = Path(project_root) / ".brain"
    if not brain_dir.exists():
        try:
            brain_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(
                f"Warning: Could not create .brain directory: {exc}. "
                "Manifest operations will fail.",
                file=sys.stderr,
            )
    return brain_dir / "manifest.json"


def read_manifest(project_root: str | PathLike) -> Manifest:
    """Read the manifest, or return an empty one if none exists."""
    path = manifest_path(project_root)
    if not path.exists():
        return Manifest(tasks_yaml_sha256="")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BrainError(f"Failed to read manifest at {path}: {exc}") from exc
    try:
        return Manifest.from_dict(json.loads(content))
    except (ValueError, BrainError) as exc:
        raise BrainError(f"Failed to parse manifest JSON: {exc}") from exc


def write_manifest(project_root: str | PathLike, manifest: Manifest) -> None:
    """Atomically write the manifest as pretty-printed JSON."""
    path = manifest_path(project_root)
    content = json.dumps(manifest.to_dict(), indent=2)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise BrainError(f"Failed to write temporary manifest to {temp_path}: {exc}") from exc
    try:
        os.replace(temp_path, path)
    except OSError as exc:
        raise BrainError(f"Failed to rename temporary manifest to {path}: {exc}") from exc


def text_hash(text: str) -> str:
    """Return the lowercase hex SHA-256 of the UTF-8 encoded text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def calculate_file_hash(path: str | PathLike) -> str:
    """Return the lowercase hex SHA-256 of a file's content."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise BrainError(f"Failed to read file for hashing at {path}: {exc}") from exc
    return hashlib.sha256(data).hexdigest()