# src/jo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.parser import parse
from ..core.state import AppState
from ..errors import JoError, StorageError

logger = logging.getLogger(__name__)

PROMPT = "> "


def handle_line(state: AppState, line: str) -> bool:
    """
    Parse and execute one input line against `state`.

    Returns True when the session should end. User errors are shown through
    the Ui and never end the session.
    """
    try:
        command = parse(line)
        command.execute(state.tasks, state.ui, state.storage)
    except StorageError as e:
        # The in-memory change already happened; only the write failed.
        logger.error("Persisting tasks failed: %s", e)
        state.ui.show_error(str(e))
        return False
    except JoError as e:
        logger.info("Command rejected: %s", e)
        state.ui.show_error(str(e))
        return False
    except Exception:
        logger.exception("Command handler crashed.")
        state.ui.show_error("Internal error while handling that command.")
        return False

    return command.is_exit()


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    state.ui.show_welcome()

    while True:
        try:
            user_input = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if handle_line(state, user_input):
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
