"""Data model for the task graph and the project manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

_U32_MAX = 2**32 - 1


class BrainError(Exception):
    """Base error for task graph and project operations."""


class TaskNotFoundError(BrainError, LookupError):
    """Raised when a task ID is not present in the task graph."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task ID '{task_id}' not found in tasks.yaml")
        self.task_id = task_id


def _mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise BrainError(f"invalid type for {what}: expected a mapping")
    return data


def _value(data: dict, key: str, what: str, optional: bool) -> Any:
    value = data.get(key)
    if value is None and not optional:
        raise BrainError(f"{what}: missing field `{key}`")
    return value


def _string(data: dict, key: str, what: str, optional: bool = False) -> str | None:
    value = _value(data, key, what, optional)
    if value is None:
        return None
    if not isinstance(value, str):
        raise BrainError(f"{what}: field `{key}` must be a string")
    return value


def _u32(data: dict, key: str, what: str) -> int:
    value = _value(data, key, what, False)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise BrainError(f"{what}: field `{key}` must be an unsigned 32-bit integer")
    return value


def _strings(data: dict, key: str, what: str, optional: bool = False) -> list[str] | None:
    value = _value(data, key, what, optional)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise BrainError(f"{what}: field `{key}` must be a list of strings")
    return list(value)


@dataclass
class Manifest:
    """Bookkeeping stored in .brain/manifest.json."""

    tasks_yaml_sha256: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        data = _mapping(data, "manifest")
        return cls(tasks_yaml_sha256=_string(data, "tasks_yaml_sha256", "manifest"))

    def to_dict(self) -> dict[str, Any]:
        return {"tasks_yaml_sha256": self.tasks_yaml_sha256}


@dataclass
class ContextQuery:
    """A query describing what context a task needs, with a token budget."""

    prompt: str
    token_budget: int

    @classmethod
    def from_dict(cls, data: Any) -> ContextQuery:
        data = _mapping(data, "contextQuery")
        return cls(
            prompt=_string(data, "prompt", "contextQuery"),
            token_budget=_u32(data, "tokenBudget", "contextQuery"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"prompt": self.prompt, "tokenBudget": self.token_budget}


@dataclass
class AcceptanceCriterion:
    """One check that must hold for a task to be accepted."""

    description: str
    check_type: str
    file: str
    assertion: str | None = None
    value: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AcceptanceCriterion:
        what = "acceptance criterion"
        data = _mapping(data, what)
        return cls(
            description=_string(data, "description", what),
            check_type=_string(data, "type", what),
            file=_string(data, "file", what),
            assertion=_string(data, "assertion", what, optional=True),
            value=_string(data, "value", what, optional=True),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "type": self.check_type,
            "file": self.file,
            "assertion": self.assertion,
            "value": self.value,
        }


@dataclass
class Task:
    """A node in the task graph."""

    id: str
    label: str
    status: str
    needs: list[str] = field(default_factory=list)
    goal: str | None = None
    context_files: list[str] | None = None
    context_query: ContextQuery | None = None
    acceptance_criteria: list[AcceptanceCriterion] | None = None
    test_file: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        data = _mapping(data, "task")
        what = f"task {data.get('id')!r}" if isinstance(data.get("id"), str) else "task"
        query = data.get("contextQuery")
        criteria = data.get("acceptanceCriteria")
        if criteria is not None and not isinstance(criteria, list):
            raise BrainError(f"{what}: field `acceptanceCriteria` must be a list")
        return cls(
            id=_string(data, "id", what),
            label=_string(data, "label", what),
            goal=_string(data, "goal", what, optional=True),
            status=_string(data, "status", what),
            needs=_strings(data, "needs", what),
            context_files=_strings(data, "contextFiles", what, optional=True),
            context_query=None if query is None else ContextQuery.from_dict(query),
            acceptance_criteria=(
                None
                if criteria is None
                else [AcceptanceCriterion.from_dict(item) for item in criteria]
            ),
            test_file=_string(data, "testFile", what, optional=True),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "goal": self.goal,
            "status": self.status,
            "needs": list(self.needs),
            "contextFiles": None if self.context_files is None else list(self.context_files),
            "contextQuery": None if self.context_query is None else self.context_query.to_dict(),
            "acceptanceCriteria": (
                None
                if self.acceptance_criteria is None
                else [criterion.to_dict() for criterion in self.acceptance_criteria]
            ),
            "testFile": self.test_file,
        }


@dataclass
class TaskGraph:
    """The full set of tasks stored in tasks.yaml."""

    version: int
    tasks: list[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> TaskGraph:
        data = _mapping(data, "task graph")
        tasks = _value(data, "tasks", "task graph", False)
        if not isinstance(tasks, list):
            raise BrainError("task graph: field `tasks` must be a list")
        return cls(
            version=_u32(data, "version", "task graph"),
            tasks=[Task.from_dict(item) for item in tasks],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"version": self.version, "tasks": [task.to_dict() for task in self.tasks]}

    @classmethod
    def from_yaml(cls, text: str) -> TaskGraph:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise BrainError(f"invalid YAML: {exc}") from exc
        return cls.from_dict(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    def find(self, task_id: str) -> Task:
        """Return the task with the given ID."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)