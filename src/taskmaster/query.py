"""Read-only filters over a snapshot of tasks."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from taskmaster.models import StatusFilter, Task
from taskmaster.validation import parse_due_date


def by_status(tasks: Sequence[Task], status: StatusFilter) -> list[Task]:
    """Filter tasks by completion status."""
    if status is StatusFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if status is StatusFilter.DONE:
        return [t for t in tasks if t.completed]
    return list(tasks)


def search(tasks: Sequence[Task], text: str) -> list[Task]:
    """Case-insensitive substring search over titles and descriptions.

    Blank text returns every task in its original order.
    """
    if not text.strip():
        return list(tasks)
    query = text.strip().lower()
    return [t for t in tasks if t.matches_text(query)]


def by_category(tasks: Sequence[Task], label: str) -> list[Task]:
    """Tasks whose category equals label, ignoring case."""
    wanted = label.casefold()
    return [t for t in tasks if t.category.casefold() == wanted]


def by_priority(tasks: Sequence[Task], priority: str) -> list[Task]:
    """Tasks with exactly this priority (case-sensitive)."""
    return [t for t in tasks if t.priority == priority]


def is_overdue(task: Task, today: date) -> bool:
    """An active task is overdue once its due date has passed.

    Tasks with an unparsable due date are never overdue.
    """
    if task.completed:
        return False
    due = parse_due_date(task.due_date)
    return due is not None and due < today


def overdue(tasks: Sequence[Task], today: date) -> list[Task]:
    """Active tasks whose due date is strictly before today."""
    return [t for t in tasks if is_overdue(t, today)]


def group_by_category(tasks: Sequence[Task]) -> dict[str, list[Task]]:
    """Group tasks by category.

    Returns:
        Categories in sorted order, each with its tasks sorted by id
    """
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        groups.setdefault(task.category, []).append(task)
    return {cat: sorted(groups[cat], key=lambda t: t.id) for cat in sorted(groups)}
