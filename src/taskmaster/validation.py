"""Field validation and the category registry."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from datetime import date, datetime

from taskmaster.models import DATE_FORMAT, DEFAULT_CATEGORIES, PRIORITIES, UNCATEGORIZED

logger = logging.getLogger(__name__)

# Two-digit day, two-digit month, four-digit year. strptime alone would
# also accept "1.1.2020".
_DUE_DATE_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")


def is_valid_title(title: str) -> bool:
    """A title is valid when it is not blank after trimming."""
    return bool(title.strip())


def is_valid_priority(priority: str) -> bool:
    """A priority is valid only on an exact match with one of PRIORITIES."""
    return priority in PRIORITIES


def parse_due_date(text: str) -> date | None:
    """Parse a dd.mm.yyyy due date.

    Returns:
        The parsed date, or None if the text is malformed or not a real
        calendar date (e.g. 31.02.2024).
    """
    if not _DUE_DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_due_date(text: str) -> bool:
    """Check a due date without raising."""
    return parse_due_date(text) is not None


class CategoryRegistry:
    """Known category labels in registration order.

    Seeded with the default labels. Grows whenever a task is saved with an
    unseen non-blank label. The uncategorized sentinel is never registered.
    """

    def __init__(
        self,
        defaults: Iterable[str] = DEFAULT_CATEGORIES,
        uncategorized: str = UNCATEGORIZED,
    ) -> None:
        self._labels: dict[str, None] = dict.fromkeys(defaults)
        self.uncategorized = uncategorized

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def labels(self) -> list[str]:
        """Registered labels in registration order."""
        return list(self._labels)

    def ensure(self, label: str) -> str:
        """Resolve a category label, registering it if new.

        Args:
            label: The category as entered (already trimmed by the caller)

        Returns:
            The sentinel for a blank label, otherwise the label unchanged
        """
        if not label.strip():
            return self.uncategorized
        if label not in self._labels:
            logger.debug("Registering new category %r", label)
            self._labels[label] = None
        return label
