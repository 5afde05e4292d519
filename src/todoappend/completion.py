"""Mark a single line of the task file as done."""

from __future__ import annotations

from datetime import date

from todoappend.errors import AlreadyCompletedError, LineOutOfRangeError
from todoappend.todotxt import is_completed, join_lines, mark_complete, split_lines


def complete_line(content: str, line_index: int, today: date) -> str:
    """Return ``content`` with the line at ``line_index`` completed.

    Only the target line changes. No trailing newline is added or
    removed.

    Raises:
        LineOutOfRangeError: ``line_index`` is outside the file
        AlreadyCompletedError: the line is blank or already done
    """
    lines = split_lines(content)
    if line_index < 0 or line_index >= len(lines):
        raise LineOutOfRangeError(line_index, len(lines))

    line = lines[line_index].strip()
    if not line or is_completed(line):
        raise AlreadyCompletedError(line_index)

    lines[line_index] = mark_complete(line, today.isoformat())
    return join_lines(lines)
