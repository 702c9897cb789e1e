"""Summary statistics over the task store."""

from __future__ import annotations

from dataclasses import dataclass, field

from taskmaster.models import PRIORITIES
from taskmaster.query import overdue
from taskmaster.store import TaskStore


@dataclass
class Stats:
    """Aggregated counts for the analytics screen."""

    total: int = 0
    done: int = 0
    active: int = 0
    completion_percent: int = 0
    """Truncated, never rounded: 1 of 3 done is 33."""

    by_priority: dict[str, int] = field(default_factory=dict)
    """Every priority value, zero counts included."""

    by_category: dict[str, int] = field(default_factory=dict)
    """Every registered category. The uncategorized sentinel is not listed."""

    overdue_count: int = 0


def compute_stats(store: TaskStore) -> Stats:
    """Compute statistics from the current store contents."""
    tasks = store.read_all()
    total = len(tasks)
    done = sum(1 for t in tasks if t.completed)

    by_priority = {p: sum(1 for t in tasks if t.priority == p) for p in PRIORITIES}
    by_category = {
        label: sum(1 for t in tasks if t.category.casefold() == label.casefold())
        for label in store.categories
    }

    return Stats(
        total=total,
        done=done,
        active=total - done,
        completion_percent=0 if total == 0 else done * 100 // total,
        by_priority=by_priority,
        by_category=by_category,
        overdue_count=len(overdue(tasks, store.today())),
    )
