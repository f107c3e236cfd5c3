# src/jo/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks owned by the running session.

    Indices are zero-based here; commands convert the user's 1-based numbers
    before calling in. Insertion order is display order and file order.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._items: list[Task] = list(tasks or [])

    def add_task(self, task: Task) -> None:
        self._items.append(task)

    def contains_index(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def get_task(self, index: int) -> Task:
        # Negative indices would silently wrap around on a plain list.
        if not self.contains_index(index):
            raise IndexError(f"task index {index} out of range (size={len(self._items)})")
        return self._items[index]

    def remove_task(self, index: int) -> Task:
        if not self.contains_index(index):
            raise IndexError(f"task index {index} out of range (size={len(self._items)})")
        return self._items.pop(index)

    def size(self) -> int:
        return len(self._items)

    def as_sequence(self) -> tuple[Task, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._items))
