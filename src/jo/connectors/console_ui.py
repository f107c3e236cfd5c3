# src/jo/connectors/console_ui.py

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from datetime import date
from typing import TextIO

from ..tasks.task_models import Task, format_date

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _plural(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class ConsoleUi:
    """
    Plain-text renderer for the console connector.

    Every reply is framed by a divider line. Writes go to `out` (stdout by default);
    a broken stream is logged, never raised, so a failed print cannot abort a command.
    """

    def __init__(self, app_name: str = "jo", out: TextIO | None = None) -> None:
        self._app_name = app_name
        self._out = out

    def _reply(self, *lines: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        try:
            out.write(DIVIDER + "\n")
            for line in lines:
                out.write(f"  {line}\n")
            out.write(DIVIDER + "\n")
            out.flush()
        except (OSError, ValueError):
            logger.debug("Console write failed.", exc_info=True)

    @staticmethod
    def _numbered(tasks: Sequence[Task]) -> list[str]:
        return [f"{i}. {t}" for i, t in enumerate(tasks, start=1)]

    # ---- session ----

    def show_welcome(self) -> None:
        self._reply(f"Hello! I'm {self._app_name}.", "What can I do for you?")

    def show_goodbye(self) -> None:
        self._reply("Bye. Hope to see you again soon!")

    def show_error(self, message: str) -> None:
        self._reply(f"OOPS!!! {message}")

    # ---- mutations ----

    def show_added(self, task: Task, total: int) -> None:
        self._reply(
            "Got it. I've added this task:",
            f"  {task}",
            f"Now you have {_plural(total)} in the list.",
        )

    def show_marked(self, tasks: Sequence[Task], done: bool) -> None:
        head = (
            "Nice! I've marked this as done:"
            if done
            else "OK, I've marked this as not done yet:"
        )
        if len(tasks) > 1:
            head = head.replace("this", "these")
        self._reply(head, *(f"  {t}" for t in tasks))

    def show_deleted(self, tasks: Sequence[Task], total: int) -> None:
        head = "Noted. I've removed this task:" if len(tasks) == 1 else "Noted. I've removed these tasks:"
        self._reply(head, *(f"  {t}" for t in tasks), f"Now you have {_plural(total)} in the list.")

    # ---- queries ----

    def show_tasks(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._reply("Your list is empty.")
            return
        self._reply("Here are the tasks in your list:", *self._numbered(tasks))

    def show_matches(self, tasks: Sequence[Task], keyword: str) -> None:
        if not tasks:
            self._reply(f"No tasks match {keyword!r}.")
            return
        self._reply("Here are the matching tasks in your list:", *self._numbered(tasks))

    def show_on_date(self, tasks: Sequence[Task], day: date) -> None:
        when = format_date(day)
        if not tasks:
            self._reply(f"Nothing is due or happening on {when}.")
            return
        self._reply(f"Here is what's on {when}:", *self._numbered(tasks))
