"""todo.txt line grammar.

A line is read left to right as a sequence of optional prefix tokens,
each consumed only when it matches at the current position:

    x <date>      completion marker (ends parsing; line is done)
    (A)           priority, a single uppercase letter
    YYYY-MM-DD    creation date

The remainder is the description. ``due:YYYY-MM-DD`` is looked up
anywhere in the line and left in place. Nothing here raises on
malformed input: a token that does not match is simply absent.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from todoappend.models import ParsedLine

COMPLETED_MARKER = "x "
PRIORITY_PATTERN = re.compile(r"^\(([A-Z])\)\s+")
DATE_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})\s+")
DUE_PATTERN = re.compile(r"due:(\d{4}-\d{2}-\d{2})")

LINE_SEPARATOR = "\n"


def is_completed(line: str) -> bool:
    """Check if a (trimmed) task line is marked as complete."""
    return line.startswith(COMPLETED_MARKER)


def consume(pattern: re.Pattern[str], text: str) -> tuple[str | None, str]:
    """Match ``pattern`` at the start of ``text``.

    Returns (captured group or None, text after the match).
    """
    match = pattern.match(text)
    if not match:
        return None, text
    return match.group(1), text[match.end() :]


def find_due(text: str) -> str | None:
    """Return the first ``due:`` date in ``text``."""
    match = DUE_PATTERN.search(text)
    return match.group(1) if match else None


def parse_line(line: str, line_index: int = 0) -> ParsedLine | None:
    """Parse one raw line of the task file.

    Args:
        line: The raw line (surrounding whitespace is ignored)
        line_index: Position of the line in the file

    Returns:
        The parsed fields, or None for a blank line
    """
    text = line.strip()
    if not text:
        return None

    if is_completed(text):
        return ParsedLine(line_index=line_index, raw=line, desc=text, completed=True)

    priority, rest = consume(PRIORITY_PATTERN, text)
    creation_date, rest = consume(DATE_PATTERN, rest)

    return ParsedLine(
        line_index=line_index,
        raw=line,
        desc=rest.strip(),
        priority=priority,
        creation_date=creation_date,
        due=find_due(text),
    )


def split_lines(content: str) -> list[str]:
    return content.split(LINE_SEPARATOR)


def join_lines(lines: list[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def iter_parsed(content: str) -> Iterator[ParsedLine]:
    """Yield a ParsedLine for every non-blank line, keeping file positions."""
    for index, line in enumerate(split_lines(content)):
        parsed = parse_line(line, index)
        if parsed is not None:
            yield parsed


def mark_complete(line: str, completion_date: str) -> str:
    """Rewrite an active line as done.

    The priority prefix is dropped; the creation date and description
    are kept as they are.
    """
    _, rest = consume(PRIORITY_PATTERN, line.strip())
    return f"{COMPLETED_MARKER}{completion_date} {rest}"
