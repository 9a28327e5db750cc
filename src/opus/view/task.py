# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

from opus.model.priority import Priority
from opus.model.status import Status
from opus.model.task import Task
from opus.time import datetime_to_display_local_datetime_str_optional
from opus.view.state import get_show_header

COMPLETED_TASK_COLOR = "grey50"

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "dark_orange",
    Priority.LOW: "green",
    Priority.NONE: "default",
}


def header(console: Console, sub_header: Optional[str] = None) -> None:
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]opus[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))


def format_tags(tags: set[str]) -> str:
    """Format tags as a sorted comma-separated string."""
    return ", ".join(sorted(tags))


def tasks_view(
    tasks: list[Task], title: str = "tasks", console: Optional[Console] = None
) -> None:
    console = console or Console()
    header(console, title)

    tasks_table = Table(box=box.SIMPLE)
    for column in ("#", "status", "priority", "name", "deadline", "note", "tags"):
        tasks_table.add_column(column)

    for index, task in enumerate(tasks, start=1):
        row = [
            str(index),
            "X" if task["status"] is Status.COMPLETE else " ",
            f"[{PRIORITY_COLORS[task['priority']]}]{task['priority']}"
            f"[/{PRIORITY_COLORS[task['priority']]}]",
            escape(task["name"]),
            datetime_to_display_local_datetime_str_optional(task["deadline"]) or "",
            escape(task["note"] or ""),
            format_tags(task["tags"]),
        ]
        if task["status"] is Status.COMPLETE:
            row = [
                f"[{COMPLETED_TASK_COLOR}]{column}[/{COMPLETED_TASK_COLOR}]"
                for column in row
            ]
        tasks_table.add_row(*row)

    console.print(tasks_table)
