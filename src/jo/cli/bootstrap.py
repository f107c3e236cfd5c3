# src/jo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the file store and console UI into AppState,
- loads the saved task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_ui import ConsoleUi
from ..core.state import AppState
from ..tasks.task_store import TaskFileStorage

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, ui=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). Raises StorageError if an
    existing task file cannot be read.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = TaskFileStorage(settings.tasks_path)
    tasks = storage.load()

    state = AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        ui=ui if ui is not None else ConsoleUi(app_name=getattr(settings, "app_name", "jo")),
    )
    logger.debug("State ready tasks=%d path=%s", tasks.size(), settings.tasks_path)
    return state
