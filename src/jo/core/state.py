# src/jo/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_list import TaskList
from .ports import Storage, Ui


@dataclass
class AppState:
    """
    Runtime state of one session.

    Built by `jo.cli.bootstrap.create_initial_state`; the console loop hands
    `tasks`, `ui` and `storage` to every command it executes.
    """

    settings: Any
    tasks: TaskList
    storage: Storage
    ui: Ui
