"""In-memory task store.

The store owns the task list, the category registry and the id counter.
Every mutating operation returns a ``Result`` instead of raising, so the
interactive loop can print the failure and carry on.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from datetime import date

from taskmaster.models import Task
from taskmaster.result import (
    Err,
    IllegalStateError,
    NotFoundError,
    Ok,
    Result,
    ValidationError,
)
from taskmaster.validation import (
    CategoryRegistry,
    is_valid_due_date,
    is_valid_priority,
    is_valid_title,
)

logger = logging.getLogger(__name__)

MSG_BLANK_TITLE = "Название не может быть пустым"
MSG_INVALID_PRIORITY = "Некорректный приоритет"
MSG_INVALID_DUE_DATE = "Некорректная дата (dd.MM.yyyy)"
MSG_NOT_FOUND = "Задача не найдена"
MSG_COMPLETED = "Нельзя редактировать выполненную задачу"
MSG_NOT_CONFIRMED = "Удаление не подтверждено"


def _blank_to_none(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return text


def _check_fields(
    title: str | None,
    priority: str | None,
    due_date: str | None,
) -> ValidationError | None:
    """Validate the supplied fields in order: title, priority, due date."""
    if title is not None and not is_valid_title(title):
        return ValidationError(MSG_BLANK_TITLE)
    if priority is not None and not is_valid_priority(priority):
        return ValidationError(MSG_INVALID_PRIORITY)
    if due_date is not None and not is_valid_due_date(due_date):
        return ValidationError(MSG_INVALID_DUE_DATE)
    return None


class TaskStore:
    """Tasks held in memory for the lifetime of one run."""

    def __init__(
        self,
        categories: CategoryRegistry | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        self.registry = categories if categories is not None else CategoryRegistry()
        self.today = today

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def categories(self) -> list[str]:
        """Registered category labels."""
        return self.registry.labels

    def create(
        self,
        title: str,
        description: str | None,
        priority: str,
        due_date: str,
        category: str,
    ) -> Result[Task]:
        """Create a task.

        Returns:
            Ok with the new task, or Err(ValidationError) for a blank title,
            unknown priority or malformed due date
        """
        error = _check_fields(title, priority, due_date)
        if error is not None:
            logger.debug("Rejected create: %s", error.message)
            return Err(error)

        task = Task(
            id=next(self._ids),
            title=title.strip(),
            description=_blank_to_none(description),
            priority=priority,
            due_date=due_date,
            category=self.registry.ensure(category.strip()),
            completed=False,
            created_at=self.today(),
        )
        self._tasks.append(task)
        logger.info("Created task #%d %r", task.id, task.title)
        return Ok(task)

    def read(self, task_id: int) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def read_all(self) -> list[Task]:
        """All tasks in creation order."""
        return list(self._tasks)

    def update(
        self,
        task_id: int,
        title: str | None = None,
        description: str | None = None,
        priority: str | None = None,
        due_date: str | None = None,
        category: str | None = None,
    ) -> Result[Task]:
        """Update the supplied fields of an active task.

        None leaves a field unchanged. A supplied description replaces the
        current one, and a blank one clears it. All supplied fields are
        validated before any of them is written, so a failure leaves the
        task untouched.
        """
        task = self.read(task_id)
        if task is None:
            return Err(NotFoundError(MSG_NOT_FOUND))
        if task.completed:
            logger.debug("Rejected update of completed task #%d", task_id)
            return Err(IllegalStateError(MSG_COMPLETED))

        error = _check_fields(title, priority, due_date)
        if error is not None:
            logger.debug("Rejected update of task #%d: %s", task_id, error.message)
            return Err(error)

        if title is not None:
            task.title = title.strip()
        if description is not None:
            task.description = _blank_to_none(description)
        if priority is not None:
            task.priority = priority
        if due_date is not None:
            task.due_date = due_date
        if category is not None:
            task.category = self.registry.ensure(category.strip())

        logger.info("Updated task #%d", task_id)
        return Ok(task)

    def delete(self, task_id: int, confirmed: bool) -> Result[None]:
        """Permanently remove a task once the caller has confirmed."""
        if not confirmed:
            return Err(IllegalStateError(MSG_NOT_CONFIRMED))

        task = self.read(task_id)
        if task is None:
            return Err(NotFoundError(MSG_NOT_FOUND))

        self._tasks.remove(task)
        logger.info("Deleted task #%d", task_id)
        return Ok(None)

    def complete(self, task_id: int) -> Result[Task]:
        """Mark a task as completed. Completing twice is not an error."""
        task = self.read(task_id)
        if task is None:
            return Err(NotFoundError(MSG_NOT_FOUND))

        task.complete()
        logger.info("Completed task #%d", task_id)
        return Ok(task)
