"""Read-compute-write shell around the task file.

The task file is the only state. Every call opens it, reads it whole,
hands the text to a pure function and writes the whole result back, so
edits made by other programs between calls are always picked up.
Nothing is locked; if two writers race, the last one wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from todoappend.clock import Clock
from todoappend.completion import complete_line
from todoappend.composer import append_task, compose_task
from todoappend.config import AppConfig
from todoappend.errors import TaskFileNotFoundError, TodoError
from todoappend.formatter import Formatter, append_task_to_file
from todoappend.models import OperationResult, UrgentResult
from todoappend.ranker import rank_urgent

logger = logging.getLogger(__name__)


def read_task_file(path: Path) -> str:
    """Read the file as-is, keeping its line endings.

    Bytes that are not valid UTF-8 are carried through as surrogates and
    written back unchanged by write_task_file.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def write_task_file(path: Path, content: str) -> None:
    """Write ``content`` back, encoding it before the file is truncated."""
    data = content.encode("utf-8", errors="surrogateescape")
    with open(path, "wb") as f:
        f.write(data)


class TodoEngine:
    """Compose, triage and complete tasks in one todo.txt file."""

    def __init__(
        self,
        config: AppConfig,
        clock: Clock | None = None,
        formatter: Formatter = append_task_to_file,
    ) -> None:
        self.config = config
        self.clock = clock or Clock(config.timezone)
        self.formatter = formatter

    @property
    def file_path(self) -> Path:
        return self.config.task_file

    def compose(
        self,
        text: str,
        priority: str | None = None,
        due_today: bool = False,
        template_index: int | None = -1,
    ) -> OperationResult:
        """Append a new task built from ``text`` and an optional template."""
        path = self.file_path
        try:
            template = self.config.get_template(template_index)
            record = compose_task(
                text,
                self.clock.today(),
                priority=priority,
                due_today=due_today,
                template=template,
            )
            existing = read_task_file(path) if path.exists() else ""
            path.parent.mkdir(parents=True, exist_ok=True)
            write_task_file(path, append_task(existing, record, self.formatter))
        except (TodoError, OSError, UnicodeError) as e:
            logger.warning("Could not add task to %s: %s", path, e)
            return OperationResult(ok=False, error=str(e))

        logger.debug("Appended task to %s: %s", path, record.description)
        return OperationResult(ok=True)

    def list_urgent(self) -> UrgentResult:
        """Return the urgent tasks, most pressing first.

        A missing file is an empty list, not an error.
        """
        path = self.file_path
        if not path.exists():
            logger.debug("No task file at %s", path)
            return UrgentResult(ok=True)

        try:
            content = read_task_file(path)
        except (OSError, UnicodeError) as e:
            logger.error("Could not read %s: %s", path, e)
            return UrgentResult(ok=False, error=str(e))

        items = rank_urgent(content, self.clock.today(), self.config.urgent_window_days)
        logger.debug("Found %d urgent tasks in %s", len(items), path)
        return UrgentResult(ok=True, todos=items)

    def complete(self, line_index: int) -> OperationResult:
        """Mark the task at ``line_index`` as done."""
        path = self.file_path
        try:
            if not path.exists():
                raise TaskFileNotFoundError(path)
            content = read_task_file(path)
            updated = complete_line(content, line_index, self.clock.today())
            write_task_file(path, updated)
        except (TodoError, OSError, UnicodeError) as e:
            logger.warning("Could not complete line %s in %s: %s", line_index, path, e)
            return OperationResult(ok=False, error=str(e))

        logger.debug("Completed line %d in %s", line_index, path)
        return OperationResult(ok=True)
