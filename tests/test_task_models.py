# tests/test_task_models.py

from __future__ import annotations

from datetime import date, timedelta

import pytest

from jo.errors import JoError
from jo.tasks.task_models import Task, TaskKind, format_date, parse_date


def test_display_formats() -> None:
    assert Task.todo("buy milk").display() == "[T][ ] buy milk"
    assert (
        str(Task.deadline("submit report", date(2024, 1, 5), is_done=True))
        == "[D][X] submit report (by: 2024-01-05)"
    )
    assert (
        str(Task.event("team offsite", date(2024, 3, 1), date(2024, 3, 3)))
        == "[E][ ] team offsite (from: 2024-03-01 to: 2024-03-03)"
    )


def test_mark_is_idempotent_and_drives_status_icon() -> None:
    t = Task.todo("x")
    assert t.status_icon() == " "
    t.mark(True)
    t.mark(True)
    assert t.is_done and t.status_icon() == "X"
    t.mark(False)
    assert not t.is_done and t.status_icon() == " "


def test_persisted_lines() -> None:
    assert Task.todo("buy milk").to_persisted_line() == "T | 0 | buy milk"
    assert (
        Task.deadline("submit report", date(2024, 1, 5), True).to_persisted_line()
        == "D | 1 | submit report | 2024-01-05"
    )
    assert (
        Task.event("offsite", date(2024, 3, 1), date(2024, 3, 3)).to_persisted_line()
        == "E | 0 | offsite | 2024-03-01 | 2024-03-03"
    )


@pytest.mark.parametrize(
    "task",
    [
        Task.todo("read book"),
        Task.todo("done thing", is_done=True),
        Task.deadline("return book", date(2024, 12, 1)),
        Task.event("trip", date(2024, 1, 5), date(2024, 1, 1), is_done=True),
        Task.todo("pipes | inside | text"),
        Task.deadline("a|b", date(2000, 2, 29)),
    ],
)
def test_round_trip(task: Task) -> None:
    line = task.to_persisted_line()
    decoded = Task.from_persisted_line(line)
    assert decoded == task
    assert decoded.to_persisted_line() == line


def test_decode_tolerates_spacing_around_delimiters() -> None:
    t = Task.from_persisted_line("D|1|  essay  |2024-05-06\n")
    assert t == Task.deadline("essay", date(2024, 5, 6), is_done=True)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "T | 0",
        "X | 0 | what",
        "T | 2 | bad flag",
        "T | 0 |   ",
        "D | 0 | no date",
        "D | 0 | bad date | 2024-13-01",
        "E | 0 | one date | 2024-01-01",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(JoError):
        Task.from_persisted_line(line)


def test_task_kind_tags() -> None:
    assert TaskKind.from_tag("E") is TaskKind.EVENT
    with pytest.raises(JoError):
        TaskKind.from_tag("Q")


def test_parse_date_reformats_every_day_of_a_leap_year() -> None:
    d = date(2024, 1, 1)
    while d.year == 2024:
        s = d.isoformat()
        assert format_date(parse_date(s)) == s
        d += timedelta(days=1)


@pytest.mark.parametrize(
    "text",
    ["2024-1-05", "2024-02-30", "20240105", "05-01-2024", "2024/01/05", "tomorrow", ""],
)
def test_parse_date_is_strict(text: str) -> None:
    with pytest.raises(ValueError):
        parse_date(text)


def test_occurs_on() -> None:
    day = date(2024, 1, 3)
    assert Task.deadline("d", day).occurs_on(day)
    assert not Task.deadline("d", date(2024, 1, 4)).occurs_on(day)
    assert Task.event("e", date(2024, 1, 1), date(2024, 1, 3)).occurs_on(day)
    assert Task.event("e", day, day).occurs_on(day)
    assert not Task.event("e", date(2024, 1, 4), date(2024, 1, 9)).occurs_on(day)
    assert not Task.todo("t").occurs_on(day)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"kind": TaskKind.DEADLINE}, "deadline needs a due date"),
        ({"kind": TaskKind.DEADLINE, "due": date(2024, 1, 1), "start": date(2024, 1, 1)}, "deadline needs"),
        ({"kind": TaskKind.TODO, "due": date(2024, 1, 1)}, "todo cannot carry dates"),
        ({"kind": TaskKind.TODO, "end": date(2024, 1, 1)}, "todo cannot carry dates"),
        ({"kind": TaskKind.EVENT, "start": date(2024, 1, 1)}, "event needs both"),
        ({"kind": TaskKind.EVENT, "due": date(2024, 1, 1)}, "event needs both"),
    ],
)
def test_payload_must_match_kind(kwargs: dict, message: str) -> None:
    dates = {k: v for k, v in kwargs.items() if k != "kind"}
    with pytest.raises(JoError, match=message):
        Task(kwargs["kind"], "x", **dates)


@pytest.mark.parametrize("description", ["", "   "])
def test_description_must_not_be_empty(description: str) -> None:
    with pytest.raises(JoError, match="description cannot be empty"):
        Task.todo(description)


def test_kind_accepts_tag_string() -> None:
    assert Task("D", "x", due=date(2024, 1, 1)).kind is TaskKind.DEADLINE


def test_description_is_read_only() -> None:
    t = Task.todo("read book")
    with pytest.raises(AttributeError):
        t.description = "something else"  # type: ignore[misc]
    assert t.description == "read book"
    t.mark(True)
    assert t.is_done
