# src/jo/errors.py

from __future__ import annotations


class JoError(Exception):
    """User-facing error. The message is shown as-is by the console loop."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TaskIndexError(JoError, IndexError):
    """A task number that does not refer to any task in the list."""


class StorageError(JoError, OSError):
    """The task file could not be read or written."""
