"""Error types raised by the todoappend engine."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for task file errors reported back to the caller."""


class TaskFileNotFoundError(TodoError):
    """The task file does not exist."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Task file not found: {path}")
        self.path = path


class LineOutOfRangeError(TodoError):
    """A line index does not address a line of the current file."""

    def __init__(self, line_index: int, line_count: int) -> None:
        super().__init__(f"Line {line_index} not found (file has {line_count} lines)")
        self.line_index = line_index
        self.line_count = line_count


class AlreadyCompletedError(TodoError):
    """The target line is blank or already marked done."""

    def __init__(self, line_index: int) -> None:
        super().__init__(f"Line {line_index} is already completed")
        self.line_index = line_index


class InvalidPriorityError(TodoError):
    """A priority that is not a single letter A-Z."""

    def __init__(self, priority: str) -> None:
        super().__init__(f"Invalid priority: {priority!r} (expected a letter A-Z)")
        self.priority = priority
