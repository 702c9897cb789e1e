"""Shared fixtures for taskmaster tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from taskmaster.models import PRIORITIES
from taskmaster.store import TaskStore

LOW, MEDIUM, HIGH, URGENT = PRIORITIES


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def today() -> date:
    """The current date as seen by the store fixtures."""
    return date(2024, 6, 15)


@pytest.fixture
def store(today: date) -> TaskStore:
    """An empty store whose current date is fixed."""
    return TaskStore(today=lambda: today)


@pytest.fixture
def populated_store(store: TaskStore) -> TaskStore:
    """A store holding a small mix of tasks.

    1. Отчет (Работа, high, overdue)
    2. Купить молоко (Личное, low, due later, has description)
    3. Пробежка (Здоровье, medium, overdue but completed)
    4. Налоги (Финансы, urgent, unparsable due date set directly)
    """
    store.create("Отчет", None, HIGH, "01.06.2024", "Работа").unwrap()
    store.create("Купить молоко", "Обезжиренное", LOW, "20.06.2024", "Личное").unwrap()
    store.create("Пробежка", None, MEDIUM, "10.06.2024", "Здоровье").unwrap()
    store.complete(3).unwrap()
    task = store.create("Налоги", None, URGENT, "01.01.2024", "Финансы").unwrap()
    task.due_date = "not a date"
    return store
