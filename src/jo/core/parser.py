# src/jo/core/parser.py

"""
Turns one line of user input into exactly one Command.

The parser is pure: it either returns a command or raises JoError with a
message meant for the user. Nothing is mutated until the command executes.

Dispatch uses two static tables keyed by instruction name:
- STRING_COMMANDS: the argument is free text (description, keyword, date);
- INT_COMMANDS: the argument is a comma-separated list of 1-based task numbers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from types import MappingProxyType

from ..errors import JoError
from ..tasks.task_models import Task, parse_date
from .commands import (
    AddCommand,
    CheckCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
)

logger = logging.getLogger(__name__)

INDEX_RE = re.compile(r"[0-9]+")

MSG_EMPTY = "The command cannot be empty."
MSG_NO_DESCRIPTION = "The description of a {name} cannot be empty."
MSG_NO_INDEX = "Please specify a valid task number to {name}."
MSG_BAD_INDEX = "Please specify valid index/indices using integers."
MSG_NO_DEADLINE = "Please specify a deadline."
MSG_NO_EVENT_RANGE = "Please specify a start AND end date."
MSG_BAD_DEADLINE_DATE = "Invalid date format. Please use yyyy-MM-dd."
MSG_BAD_DATE = "Invalid date format. Please use yyyy-MM-dd with a valid date."
MSG_UNKNOWN = "I'm sorry, but I don't know what that means :-("


# ---- string commands ----


def _require_description(name: str, description: str) -> str:
    if not description:
        raise JoError(MSG_NO_DESCRIPTION.format(name=name))
    return description


def _parse_todo(rest: str) -> Command:
    return AddCommand(Task.todo(rest))


def _parse_deadline(rest: str) -> Command:
    if "/by" not in rest:
        raise JoError(MSG_NO_DEADLINE)
    description, raw_date = rest.split("/by", 1)
    description = _require_description("deadline", description.strip())
    try:
        due = parse_date(raw_date)
    except ValueError:
        raise JoError(MSG_BAD_DEADLINE_DATE) from None
    return AddCommand(Task.deadline(description, due))


def _parse_event(rest: str) -> Command:
    if "/from" not in rest or "/to" not in rest:
        raise JoError(MSG_NO_EVENT_RANGE)
    description, dates = rest.split("/from", 1)
    if "/to" not in dates:
        # "/to" only appears before "/from".
        raise JoError(MSG_NO_EVENT_RANGE)
    raw_start, raw_end = dates.split("/to", 1)
    description = _require_description("event", description.strip())
    try:
        start = parse_date(raw_start)
        end = parse_date(raw_end)
    except ValueError:
        raise JoError(MSG_BAD_DATE) from None
    return AddCommand(Task.event(description, start, end))


def _parse_check(rest: str) -> Command:
    try:
        return CheckCommand(parse_date(rest))
    except ValueError:
        raise JoError(MSG_BAD_DATE) from None


def _parse_find(rest: str) -> Command:
    return FindCommand(rest)


STRING_COMMANDS: MappingProxyType[str, Callable[[str], Command]] = MappingProxyType(
    {
        "todo": _parse_todo,
        "deadline": _parse_deadline,
        "event": _parse_event,
        "check": _parse_check,
        "find": _parse_find,
    }
)

# ---- int commands ----

INT_COMMANDS: MappingProxyType[str, Callable[[tuple[int, ...]], Command]] = MappingProxyType(
    {
        "mark": lambda indices: MarkCommand(indices, True),
        "unmark": lambda indices: MarkCommand(indices, False),
        "delete": DeleteCommand,
    }
)


def parse_indices(rest: str) -> tuple[int, ...]:
    """'2, 4,1' -> (1, 3, 0). Every token must be a plain non-negative integer."""
    tokens = [tok.strip() for tok in rest.split(",")]
    if not all(INDEX_RE.fullmatch(tok) for tok in tokens):
        raise JoError(MSG_BAD_INDEX)
    return tuple(int(tok) - 1 for tok in tokens)


# ---- entry point ----


def parse(line: str) -> Command:
    trimmed = line.strip()
    if not trimmed:
        raise JoError(MSG_EMPTY)

    parts = trimmed.split(maxsplit=1)
    instruction = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""

    # A bare command name would otherwise reach a sub-parser with no argument.
    if trimmed in STRING_COMMANDS:
        raise JoError(MSG_NO_DESCRIPTION.format(name=trimmed))
    if trimmed in INT_COMMANDS:
        raise JoError(MSG_NO_INDEX.format(name=trimmed))

    if trimmed == "list":
        return ListCommand()
    if trimmed.lower() == "bye":
        return ExitCommand()

    string_parser = STRING_COMMANDS.get(instruction)
    if string_parser is not None:
        logger.debug("Parsing %r with string sub-parser", instruction)
        return string_parser(rest)

    int_command = INT_COMMANDS.get(instruction)
    if int_command is not None:
        logger.debug("Parsing %r with index sub-parser", instruction)
        return int_command(parse_indices(rest))

    raise JoError(MSG_UNKNOWN)
