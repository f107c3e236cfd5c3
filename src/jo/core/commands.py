# src/jo/core/commands.py

"""
Executable commands produced by the parser.

Every command follows the same contract:
- execute(tasks, ui, storage): apply the change (if any), persist it, report it;
- is_exit(): True only for ExitCommand, the console loop stops on it.

Mutating commands call storage.update() once per execution, after the
in-memory change. If that write fails the change is NOT rolled back; the
StorageError propagates to the console loop which reports it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..errors import TaskIndexError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .ports import Storage, Ui

logger = logging.getLogger(__name__)


class Command:
    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        raise NotImplementedError

    def is_exit(self) -> bool:
        return False


def _check_indices(tasks: TaskList, indices: tuple[int, ...]) -> None:
    """Reject the whole batch if any zero-based index is outside the list."""
    bad = [i + 1 for i in indices if not tasks.contains_index(i)]
    if not bad:
        return
    size = tasks.size()
    numbers = ", ".join(str(n) for n in bad)
    if size == 0:
        raise TaskIndexError(f"Task {numbers} does not exist: your list is empty.")
    raise TaskIndexError(
        f"Task {numbers} does not exist. Please use a number between 1 and {size}."
    )


def _unique(indices: tuple[int, ...]) -> list[int]:
    return list(dict.fromkeys(indices))


@dataclass(frozen=True, slots=True)
class AddCommand(Command):
    task: Task

    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        tasks.add_task(self.task)
        logger.debug("Added %s task (total=%d)", self.task.kind.name, tasks.size())
        storage.update(tasks)
        ui.show_added(self.task, tasks.size())


@dataclass(frozen=True, slots=True)
class MarkCommand(Command):
    """Mark (done=True) or unmark (done=False) a batch of tasks."""

    indices: tuple[int, ...]
    done: bool

    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        _check_indices(tasks, self.indices)

        changed = [tasks.get_task(i) for i in _unique(self.indices)]
        for task in changed:
            task.mark(self.done)
        logger.debug("Marked indices=%s done=%s", self.indices, self.done)

        storage.update(tasks)
        ui.show_marked(changed, self.done)


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    """
    Delete a batch of tasks.

    Indices refer to positions before any removal. They are de-duplicated and
    removed highest-first so earlier removals never shift a later target.
    """

    indices: tuple[int, ...]

    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        _check_indices(tasks, self.indices)

        removed: list[Task] = []
        for i in sorted(set(self.indices), reverse=True):
            removed.append(tasks.remove_task(i))
        removed.reverse()
        logger.debug("Deleted indices=%s (total=%d)", self.indices, tasks.size())

        storage.update(tasks)
        ui.show_deleted(removed, tasks.size())


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        ui.show_tasks(tasks.as_sequence())


@dataclass(frozen=True, slots=True)
class FindCommand(Command):
    """Case-sensitive substring search on descriptions, in list order."""

    keyword: str

    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        matches = [t for t in tasks.as_sequence() if self.keyword in t.description]
        ui.show_matches(matches, self.keyword)


@dataclass(frozen=True, slots=True)
class CheckCommand(Command):
    """Deadlines due on `day` and events running on `day`."""

    day: date

    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        matches = [t for t in tasks.as_sequence() if t.occurs_on(self.day)]
        ui.show_on_date(matches, self.day)


@dataclass(frozen=True, slots=True)
class ExitCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui, storage: Storage) -> None:
        ui.show_goodbye()

    def is_exit(self) -> bool:
        return True
