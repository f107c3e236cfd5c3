# src/jo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the commands.

Commands depend on Protocols instead of concrete implementations,
so the console UI and the file store stay swappable and tests can use fakes.
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class Storage(Protocol):
    """Persistence of the whole task list. `update` raises StorageError on failure."""

    def load(self) -> TaskList: ...
    def update(self, tasks: TaskList) -> None: ...


class Ui(Protocol):
    """
    Presentation side. Best-effort: implementations must not raise.

    Task sequences are passed in list order; `total` is the list size after the change.
    """

    def show_welcome(self) -> None: ...
    def show_goodbye(self) -> None: ...
    def show_error(self, message: str) -> None: ...

    def show_added(self, task: Task, total: int) -> None: ...
    def show_marked(self, tasks: Sequence[Task], done: bool) -> None: ...
    def show_deleted(self, tasks: Sequence[Task], total: int) -> None: ...

    def show_tasks(self, tasks: Sequence[Task]) -> None: ...
    def show_matches(self, tasks: Sequence[Task], keyword: str) -> None: ...
    def show_on_date(self, tasks: Sequence[Task], day: date) -> None: ...
