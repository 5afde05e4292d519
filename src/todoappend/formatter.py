"""Serialise task records into canonical todo.txt lines."""

from __future__ import annotations

from collections.abc import Callable

from todoappend.models import TaskRecord

Formatter = Callable[[str, TaskRecord], str]


def format_task(record: TaskRecord) -> str:
    """Render a record as one todo.txt line.

    Projects, contexts and tags that the description does not already
    contain are appended after it, so nothing in the record is lost.
    """
    parts: list[str] = []

    if record.completed:
        parts.append("x")
    elif record.priority:
        parts.append(f"({record.priority})")

    if record.creation_date:
        parts.append(record.creation_date)

    description = record.description.strip()
    if description:
        parts.append(description)

    present = set(description.split())
    extras = [f"+{p}" for p in record.projects]
    extras += [f"@{c}" for c in record.contexts]
    extras += [f"{key}:{value}" for key, value in record.tags.items()]
    for token in extras:
        if token not in present:
            parts.append(token)
            present.add(token)

    return " ".join(parts)


def append_task_to_file(existing: str, record: TaskRecord) -> str:
    """Return ``existing`` with the record appended as a new last line."""
    line = format_task(record)
    if not existing:
        return line
    return f"{existing}\n{line}"
