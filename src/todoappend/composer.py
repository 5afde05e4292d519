"""Compose new task entries from free text and templates."""

from __future__ import annotations

from datetime import date

from todoappend.config import Template
from todoappend.errors import InvalidPriorityError
from todoappend.formatter import Formatter, append_task_to_file
from todoappend.models import TaskRecord


def normalise_priority(priority: str | None) -> str | None:
    """Upper-case a single-letter priority; empty means none."""
    if not priority:
        return None
    value = priority.strip().upper()
    if not value:
        return None
    if len(value) != 1 or not "A" <= value <= "Z":
        raise InvalidPriorityError(priority)
    return value


def compose_task(
    text: str,
    today: date,
    priority: str | None = None,
    due_today: bool = False,
    template: Template | None = None,
) -> TaskRecord:
    """Build the record for a new task.

    Template tags follow the text, and ``due:`` follows the tags. Only
    the template's projects and contexts are used; the priority comes
    from the caller alone.
    """
    today_str = today.isoformat()
    description = text.strip()

    if template is not None:
        tags = template.tag_string()
        if tags:
            description += f" {tags}"

    if due_today:
        description += f" due:{today_str}"

    return TaskRecord(
        description=description,
        creation_date=today_str,
        priority=normalise_priority(priority),
        projects=list(template.projects) if template else [],
        contexts=list(template.contexts) if template else [],
        tags={"due": today_str} if due_today else {},
    )


def append_task(
    existing: str,
    record: TaskRecord,
    formatter: Formatter = append_task_to_file,
) -> str:
    """Return the new file content with ``record`` appended.

    Trailing whitespace of the existing content is dropped and the
    result always ends with exactly one newline.
    """
    return formatter(existing.rstrip(), record) + "\n"
