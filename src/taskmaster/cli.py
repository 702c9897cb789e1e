"""CLI interface for taskmaster."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import click
from pydantic import ValidationError as ConfigValidationError
from rich.console import Console

from taskmaster import __version__, query
from taskmaster.analytics import compute_stats
from taskmaster.config import DisplayConfig, TaskmasterConfig
from taskmaster.display import (
    print_error,
    print_grouped,
    print_header,
    print_stats,
    print_task_line,
    print_tasks,
)
from taskmaster.logging_setup import setup_logging
from taskmaster.models import PRIORITIES, StatusFilter
from taskmaster.store import TaskStore
from taskmaster.validation import CategoryRegistry

logger = logging.getLogger(__name__)

console = Console()

YES_ANSWERS = frozenset({"y", "yes", "д", "да"})

MAIN_MENU = (
    "1. Добавить задачу",
    "2. Список задач",
    "3. Редактировать задачу",
    "4. Удалить задачу",
    "5. Отметить выполненной",
    "6. Поиск / Фильтры",
    "7. Аналитика",
    "0. Выход",
)

FILTER_MENU = (
    "1. Поиск по тексту",
    "2. Фильтр по статусу",
    "3. Фильтр по категории",
    "4. Фильтр по приоритету",
    "5. Просроченные задачи",
)

STATUS_OPTIONS = {
    "Все": StatusFilter.ALL,
    "Активные": StatusFilter.ACTIVE,
    "Выполненные": StatusFilter.DONE,
}


@click.command()
@click.version_option(version=__version__, prog_name="taskmaster")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: .taskmaster/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the full log to this file",
)
def main(config_path: Path | None, verbose: bool, log_file: Path | None) -> None:
    """taskmaster - interactive task manager.

    Tasks live in memory for the duration of the session. Pick menu items
    by number; 0 exits.
    """
    try:
        config = TaskmasterConfig.load(config_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ConfigValidationError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e

    console_level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    setup_logging(console_level=console_level, log_file=log_file or config.logging.file)

    registry = CategoryRegistry(
        config.categories.defaults,
        uncategorized=config.categories.uncategorized,
    )
    store = TaskStore(categories=registry)
    run_menu(store, config.display)


# Input helpers. Malformed input is handled here, never in the store.


def _ask(text: str) -> str:
    """Prompt for a line of text, trimmed. Empty input is allowed."""
    return click.prompt(text, default="", show_default=False).strip()


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def _ask_yes_no(text: str) -> bool:
    return _ask(f"{text} (y/n)").lower() in YES_ANSWERS


def _choose(title: str, options: list[str]) -> str:
    """Pick an option by number, falling back to the first one."""
    console.print(title)
    for i, option in enumerate(options, 1):
        console.print(f"  [cyan]{i}[/cyan]. {option}")
    index = _parse_int(_ask("Выберите номер"))
    if index is not None and 1 <= index <= len(options):
        return options[index - 1]
    return options[0]


def _ask_id() -> int | None:
    task_id = _parse_int(_ask("ID задачи"))
    if task_id is None:
        console.print("[yellow]Некорректный ID[/yellow]")
    return task_id


# Screens


def _ui_add(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Добавление задачи")
    title = _ask("Название")
    description = _ask("Описание (опционально)") or None
    priority = _choose("Приоритет", list(PRIORITIES))
    category = _ask("Категория (существующая или новая)")
    due_date = _ask("Дата выполнения (dd.MM.yyyy)")

    result = store.create(title, description, priority, due_date, category)
    if result.ok:
        print_task_line(console, "Создано", result.value, display)
    else:
        print_error(console, result.message)


def _ui_list(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Все задачи")
    groups = query.group_by_category(store.read_all())
    if not groups:
        console.print("[dim]Задач нет[/dim]")
        return
    print_grouped(console, groups, display)


def _ui_edit(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Редактирование задачи")
    task_id = _ask_id()
    if task_id is None:
        return

    title = _ask("Новое название (пусто — оставить)") or None
    raw_description = _ask("Новое описание (пусто — оставить, '-' — очистить)")
    if raw_description == "-":
        description: str | None = ""
    else:
        description = raw_description or None
    priority = None
    if _ask_yes_no("Изменить приоритет?"):
        priority = _choose("Приоритет", list(PRIORITIES))
    due_date = _ask("Новая дата (dd.MM.yyyy, пусто — оставить)") or None
    category = _ask("Новая категория (пусто — оставить)") or None

    result = store.update(task_id, title, description, priority, due_date, category)
    if result.ok:
        print_task_line(console, "Обновлено", result.value, display)
    else:
        print_error(console, result.message)


def _ui_delete(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Удаление задачи")
    task_id = _ask_id()
    if task_id is None:
        return

    result = store.delete(task_id, _ask_yes_no("Точно удалить?"))
    if result.ok:
        console.print("[green]Удалено[/green]")
    else:
        print_error(console, result.message)


def _ui_complete(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Отметить выполненной")
    task_id = _ask_id()
    if task_id is None:
        return

    result = store.complete(task_id)
    if result.ok:
        print_task_line(console, "Выполнено", result.value, display)
    else:
        print_error(console, result.message)


def _ui_filters(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Поиск и фильтры")
    for item in FILTER_MENU:
        console.print(item)

    tasks = store.read_all()
    choice = _parse_int(_ask("Ваш выбор"))
    if choice == 1:
        print_tasks(console, query.search(tasks, _ask("Поиск по названию/описанию")), display)
    elif choice == 2:
        status = STATUS_OPTIONS[_choose("Статус", list(STATUS_OPTIONS))]
        print_tasks(console, query.by_status(tasks, status), display)
    elif choice == 3:
        print_tasks(console, query.by_category(tasks, _ask("Категория")), display)
    elif choice == 4:
        priority = _choose("Приоритет", list(PRIORITIES))
        print_tasks(console, query.by_priority(tasks, priority), display)
    elif choice == 5:
        print_tasks(console, query.overdue(tasks, store.today()), display)
    else:
        console.print("[yellow]Некорректный выбор[/yellow]")


def _ui_analytics(store: TaskStore, display: DisplayConfig) -> None:
    print_header(console, "Аналитика")
    print_stats(console, compute_stats(store))


SCREENS: dict[int, Callable[[TaskStore, DisplayConfig], None]] = {
    1: _ui_add,
    2: _ui_list,
    3: _ui_edit,
    4: _ui_delete,
    5: _ui_complete,
    6: _ui_filters,
    7: _ui_analytics,
}


def run_menu(store: TaskStore, display: DisplayConfig | None = None) -> None:
    """Run the interactive menu until the user picks 0.

    End of input (or Ctrl+C) at any prompt ends the session the same way.
    """
    if display is None:
        display = DisplayConfig()

    try:
        _menu_loop(store, display)
    except click.Abort:
        console.print()
        logger.debug("Input closed, exiting menu with %d task(s) in memory", len(store))


def _menu_loop(store: TaskStore, display: DisplayConfig) -> None:
    while True:
        console.print()
        console.print("[bold]TaskMaster — Система управления задачами[/bold]")
        for item in MAIN_MENU:
            console.print(item)

        choice = _parse_int(_ask("Ваш выбор"))
        if choice == 0:
            logger.debug("Exiting menu with %d task(s) in memory", len(store))
            return

        screen = SCREENS.get(choice) if choice is not None else None
        if screen is None:
            console.print("[yellow]Некорректный выбор[/yellow]")
            continue
        screen(store, display)
