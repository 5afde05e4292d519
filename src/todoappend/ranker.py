"""Select and order the urgent subset of a task file."""

from __future__ import annotations

from datetime import date

from todoappend.clock import date_window
from todoappend.models import ParsedLine, UrgentItem
from todoappend.todotxt import iter_parsed

URGENT_PRIORITY = "A"
DEFAULT_WINDOW_DAYS = 7


def is_urgent(parsed: ParsedLine, threshold: str) -> bool:
    """Priority A, or due on or before ``threshold``."""
    if parsed.completed:
        return False
    if parsed.priority == URGENT_PRIORITY:
        return True
    return parsed.due is not None and parsed.due <= threshold


def urgency_key(item: UrgentItem) -> tuple[bool, bool, bool, str]:
    """Sort key: overdue, then priority A, then earliest due date.

    Dates are fixed-width ``YYYY-MM-DD`` strings, so string order is
    date order. Items that tie on every key keep file order because
    ``sorted`` is stable.
    """
    return (
        not item.is_overdue,
        item.priority != URGENT_PRIORITY,
        item.due is None,
        item.due or "",
    )


def rank_urgent(
    content: str,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[UrgentItem]:
    """Return the urgent tasks in ``content``, most pressing first.

    Args:
        content: Full text of the task file
        today: The current date in the reference time zone
        window_days: How far ahead a due date still counts as urgent

    Returns:
        Ordered urgent items; empty when nothing qualifies
    """
    today_str = today.isoformat()
    threshold = date_window(today, window_days)

    items = [
        UrgentItem(
            priority=parsed.priority,
            due=parsed.due,
            desc=parsed.desc,
            is_overdue=parsed.due is not None and parsed.due < today_str,
            line_index=parsed.line_index,
        )
        for parsed in iter_parsed(content)
        if is_urgent(parsed, threshold)
    ]

    return sorted(items, key=urgency_key)
