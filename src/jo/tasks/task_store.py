# src/jo/tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import JoError, StorageError
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFileStorage:
    """
    Plain-text task store: one persisted line per task.

    The whole file is rewritten on every update. There is no temp-file/replace
    step, so a crash mid-write can leave a truncated file.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        """
        Read the task file into a TaskList.

        A missing file is an empty list. Lines that fail to decode are logged and
        skipped so a single bad line does not hide the rest of the file.
        """
        if not self._path.exists():
            logger.info("Task file %s not found; starting with an empty list.", self._path)
            return TaskList()

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise StorageError(f"Could not read tasks from {self._path}: {e}") from e

        tasks = TaskList()
        # Decoded per line so one non-UTF-8 line is skipped like any other bad line.
        for lineno, raw_line in enumerate(raw.splitlines(), start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning("Skipping line %d of %s: not valid UTF-8 (%s)", lineno, self._path, e)
                continue
            if not line.strip():
                continue
            try:
                tasks.add_task(Task.from_persisted_line(line))
            except JoError as e:
                logger.warning("Skipping line %d of %s: %s", lineno, self._path, e)

        logger.info("Loaded %d tasks from %s", tasks.size(), self._path)
        return tasks

    def update(self, tasks: TaskList) -> None:
        lines = [t.to_persisted_line() for t in tasks.as_sequence()]
        body = "\n".join(lines) + ("\n" if lines else "")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(body, "utf-8")
        except OSError as e:
            raise StorageError(f"Could not save tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
