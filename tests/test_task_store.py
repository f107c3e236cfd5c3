# tests/test_task_store.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from jo.errors import StorageError
from jo.tasks.task_list import TaskList
from jo.tasks.task_models import Task
from jo.tasks.task_store import TaskFileStorage


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskFileStorage(tmp_path / "nope" / "tasks.txt")
    assert store.load().size() == 0


def test_update_then_load(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "tasks.txt"
    store = TaskFileStorage(path)
    tasks = TaskList(
        [
            Task.todo("read book", is_done=True),
            Task.deadline("return book", date(2024, 12, 1)),
            Task.event("trip", date(2024, 1, 1), date(2024, 1, 5)),
        ]
    )

    store.update(tasks)

    assert path.read_text("utf-8") == (
        "T | 1 | read book\n"
        "D | 0 | return book | 2024-12-01\n"
        "E | 0 | trip | 2024-01-01 | 2024-01-05\n"
    )
    assert store.load().as_sequence() == tasks.as_sequence()


def test_update_overwrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFileStorage(path)
    store.update(TaskList([Task.todo("a"), Task.todo("b")]))
    store.update(TaskList([Task.todo("b")]))
    assert path.read_text("utf-8") == "T | 0 | b\n"

    store.update(TaskList())
    assert path.read_text("utf-8") == ""


def test_corrupt_lines_are_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "T | 0 | keep me\n"
        "\n"
        "garbage\n"
        "D | 1 | bad date | 2024-99-99\n"
        "E | 1 | keep too | 2024-01-01 | 2024-01-02\n",
        "utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="jo.tasks.task_store"):
        loaded = TaskFileStorage(path).load()

    assert [t.description for t in loaded] == ["keep me", "keep too"]
    assert "line 3" in caplog.text
    assert "line 4" in caplog.text


def test_write_failure_raises_storage_error(tmp_path: Path) -> None:
    # The target path is an existing directory, so opening it for writing fails.
    path = tmp_path / "tasks.txt"
    path.mkdir()
    store = TaskFileStorage(path)

    with pytest.raises(StorageError) as excinfo:
        store.update(TaskList([Task.todo("x")]))
    assert isinstance(excinfo.value.__cause__, OSError)
    assert str(path) in str(excinfo.value)


def test_non_utf8_line_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | ok\nT | 0 | caf\xe9\nT | 1 | still here\n")

    with caplog.at_level(logging.WARNING, logger="jo.tasks.task_store"):
        loaded = TaskFileStorage(path).load()

    assert [t.description for t in loaded] == ["ok", "still here"]
    assert "line 2" in caplog.text
    assert "UTF-8" in caplog.text
