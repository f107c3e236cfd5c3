# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from jo.core.state import AppState
from jo.tasks.task_list import TaskList
from jo.tasks.task_models import Task

from .fakes import FakeStorage, FakeUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="jo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
        log_dir=tmp_path / "data",
    )


@pytest.fixture()
def ui() -> FakeUi:
    return FakeUi()


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def tasks() -> TaskList:
    """Five tasks, one of each kind plus two extra todos."""
    return TaskList(
        [
            Task.todo("read book"),
            Task.deadline("return book", date(2024, 12, 1)),
            Task.event("trip", date(2024, 1, 1), date(2024, 1, 5)),
            Task.todo("buy milk"),
            Task.todo("call mum"),
        ]
    )


@pytest.fixture()
def state(settings: SimpleNamespace, ui: FakeUi, storage: FakeStorage) -> AppState:
    """AppState wired with fakes and an empty task list."""
    return AppState(settings=settings, tasks=TaskList(), storage=storage, ui=ui)
