"""Task records and operation results."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class TaskRecord:
    """A new task, before it is serialised into a todo.txt line."""

    description: str
    creation_date: str
    completed: bool = False
    priority: str | None = None
    projects: list[str] = field(default_factory=list)
    contexts: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class ParsedLine:
    """Fields read back out of one raw line of the task file."""

    line_index: int
    raw: str
    desc: str
    completed: bool = False
    priority: str | None = None
    creation_date: str | None = None
    due: str | None = None


class UrgentItem(BaseModel):
    """A task selected for the urgent view.

    Dumped with ``by_alias=True`` the keys are ``isOverdue`` and
    ``lineIndex``.
    """

    model_config = ConfigDict(populate_by_name=True)

    priority: str | None = None
    due: str | None = None
    desc: str
    is_overdue: bool = Field(default=False, alias="isOverdue")
    line_index: int = Field(alias="lineIndex")


class OperationResult(BaseModel):
    """Outcome of a mutating operation."""

    ok: bool
    error: str | None = None


class UrgentResult(OperationResult):
    """Outcome of the urgent listing."""

    todos: list[UrgentItem] = Field(default_factory=list)
