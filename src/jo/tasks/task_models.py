# src/jo/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..errors import JoError

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

FIELD_SEP = " | "


class TaskKind(StrEnum):
    """
    Task variant, stored as the one-letter tag of the persisted line.

    The variants only differ in the dates they carry:
    - TODO: none
    - DEADLINE: due
    - EVENT: start, end
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str) -> TaskKind:
        try:
            return cls(raw)
        except ValueError:
            raise JoError(f"Unknown task type: {raw!r}.") from None


def parse_date(text: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date; raises ValueError otherwise."""
    s = text.strip()
    if not DATE_RE.fullmatch(s):
        raise ValueError(f"not a YYYY-MM-DD date: {text!r}")
    return date.fromisoformat(s)


def format_date(d: date) -> str:
    return d.isoformat()


@dataclass(slots=True)
class Task:
    """
    One task record. `kind` decides which dates are present:
    TODO carries none, DEADLINE only `due`, EVENT both `start` and `end`.

    The description is fixed at construction; only `is_done` changes, via `mark`.
    """

    kind: TaskKind
    _description: str
    is_done: bool = False

    due: date | None = None
    start: date | None = None
    end: date | None = None

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str, is_done: bool = False) -> Task:
        return cls(TaskKind.TODO, description, is_done)

    @classmethod
    def deadline(cls, description: str, due: date, is_done: bool = False) -> Task:
        return cls(TaskKind.DEADLINE, description, is_done, due=due)

    @classmethod
    def event(cls, description: str, start: date, end: date, is_done: bool = False) -> Task:
        return cls(TaskKind.EVENT, description, is_done, start=start, end=end)

    def __post_init__(self) -> None:
        self.kind = TaskKind(self.kind)
        if not self._description or not self._description.strip():
            raise JoError("A task description cannot be empty.")

        has_due = self.due is not None
        has_range = (self.start is not None, self.end is not None)
        if self.kind is TaskKind.TODO and (has_due or any(has_range)):
            raise JoError("A todo cannot carry dates.")
        if self.kind is TaskKind.DEADLINE and (not has_due or any(has_range)):
            raise JoError("A deadline needs a due date and nothing else.")
        if self.kind is TaskKind.EVENT and (has_due or not all(has_range)):
            raise JoError("An event needs both a start and an end date.")

    @property
    def description(self) -> str:
        return self._description

    # ---- state ----

    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark(self, done: bool) -> None:
        self.is_done = done

    def occurs_on(self, day: date) -> bool:
        """True for a deadline due on `day` or an event whose range contains it."""
        if self.kind is TaskKind.DEADLINE:
            return self.due == day
        if self.kind is TaskKind.EVENT:
            return self.start <= day <= self.end
        return False

    # ---- display ----

    def display(self) -> str:
        head = f"[{self.kind.value}][{self.status_icon()}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            return f"{head} (by: {format_date(self.due)})"
        if self.kind is TaskKind.EVENT:
            return f"{head} (from: {format_date(self.start)} to: {format_date(self.end)})"
        return head

    def __str__(self) -> str:
        return self.display()

    # ---- persisted line codec ----

    def to_persisted_line(self) -> str:
        fields = [self.kind.value, "1" if self.is_done else "0", self.description]
        if self.kind is TaskKind.DEADLINE:
            fields.append(format_date(self.due))
        elif self.kind is TaskKind.EVENT:
            fields.extend([format_date(self.start), format_date(self.end)])
        return FIELD_SEP.join(fields)

    @classmethod
    def from_persisted_line(cls, line: str) -> Task:
        """
        Decode one line written by `to_persisted_line`.

        Dates are split off from the right so a description may itself contain '|'.
        """
        parts = line.strip().split("|", 2)
        if len(parts) != 3:
            raise JoError(f"Malformed task line: {line!r}.")

        kind = TaskKind.from_tag(parts[0].strip())
        flag = parts[1].strip()
        if flag not in ("0", "1"):
            raise JoError(f"Malformed completion flag in task line: {line!r}.")
        is_done = flag == "1"
        rest = parts[2]

        n_dates = {TaskKind.TODO: 0, TaskKind.DEADLINE: 1, TaskKind.EVENT: 2}[kind]
        if n_dates:
            pieces = rest.rsplit("|", n_dates)
            if len(pieces) != n_dates + 1:
                raise JoError(f"Missing date field(s) in task line: {line!r}.")
            description = pieces[0].strip()
            try:
                dates = [parse_date(p) for p in pieces[1:]]
            except ValueError:
                raise JoError(f"Invalid date in task line: {line!r}.") from None
        else:
            description = rest.strip()
            dates = []

        if not description:
            raise JoError(f"Empty description in task line: {line!r}.")

        if kind is TaskKind.DEADLINE:
            return cls.deadline(description, dates[0], is_done)
        if kind is TaskKind.EVENT:
            return cls.event(description, dates[0], dates[1], is_done)
        return cls.todo(description, is_done)
