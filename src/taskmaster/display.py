"""Rendering of tasks and statistics for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskmaster.analytics import Stats
from taskmaster.config import DisplayConfig
from taskmaster.models import Task, format_date

DONE_MARK = "✅"
ACTIVE_MARK = "🟩"
EMPTY_LIST = "(пусто)"
LIST_HEADER = "Статус  | ID   | Название | Приоритет | Категория | Срок | Создано | Описание"


def format_task(task: Task, display: DisplayConfig | None = None) -> str:
    """Format a task as a single line.

    Example:
        🟩 #0001 | Buy milk | Низкий 🔵 | Groceries | до 01.01.2020 | создано 17.10.2026 | —
    """
    if display is None:
        display = DisplayConfig()

    status = DONE_MARK if task.completed else ACTIVE_MARK
    task_id = "#" + str(task.id).zfill(display.id_width)
    description = task.description or display.empty_marker
    return (
        f"{status} {task_id} | {task.title} | {task.priority} | {task.category} | "
        f"до {task.due_date} | создано {format_date(task.created_at)} | {description}"
    )


def print_header(console: Console, title: str) -> None:
    """Print a screen header."""
    console.print()
    console.print(Panel.fit(f"[bold]{escape(title)}[/bold]", title="taskmaster"))


def print_task_line(
    console: Console,
    prefix: str,
    task: Task,
    display: DisplayConfig | None = None,
) -> None:
    """Print a prefixed task line, e.g. after a successful create."""
    console.print(Text(f"{prefix}: {format_task(task, display)}"), soft_wrap=True)


def print_tasks(
    console: Console,
    tasks: Sequence[Task],
    display: DisplayConfig | None = None,
) -> None:
    """Print tasks one per line under a column header."""
    if not tasks:
        console.print(Text(EMPTY_LIST))
        return

    console.print(Text(LIST_HEADER, style="bold"), soft_wrap=True)
    console.print("-" * 100, soft_wrap=True)
    for task in tasks:
        console.print(Text(format_task(task, display)), soft_wrap=True)


def print_grouped(
    console: Console,
    groups: dict[str, list[Task]],
    display: DisplayConfig | None = None,
) -> None:
    """Print tasks grouped under category headings."""
    for category, tasks in groups.items():
        console.print()
        console.print(Text(f"— Категория: {category} —", style="cyan"), soft_wrap=True)
        print_tasks(console, tasks, display)


def print_error(console: Console, message: str) -> None:
    """Print a failure message from the store."""
    console.print(f"[red]Ошибка:[/red] {escape(message)}", soft_wrap=True)


def _counts_table(title: str, heading: str, counts: dict[str, int]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column(heading, style="cyan")
    table.add_column("Кол-во", justify="right")
    for label, count in counts.items():
        table.add_row(escape(label), str(count))
    return table


def print_stats(console: Console, stats: Stats) -> None:
    """Print the analytics screen."""
    console.print(f"Всего: {stats.total}")
    console.print(f"Выполнено: {stats.done}")
    console.print(f"Активные: {stats.active}")
    console.print(f"Процент выполнения: {stats.completion_percent}%")
    console.print()
    console.print(_counts_table("По приоритетам", "Приоритет", stats.by_priority))
    console.print()
    console.print(_counts_table("По категориям", "Категория", stats.by_category))
    console.print()
    console.print(f"Просроченные: {stats.overdue_count}")
