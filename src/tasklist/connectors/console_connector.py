# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import ACTION_PROMPT, registry as command_registry
from ..core.ports import LineIO
from ..core.state import AppState
from ..tasks.errors import TaskListError

logger = logging.getLogger(__name__)


class StdConsole:
    """LineIO over stdin/stdout."""

    def read_line(self) -> str:
        return input()

    def write(self, text: str) -> None:
        print(text, flush=True)


def run_console_loop(state: AppState, io: LineIO | None = None) -> None:
    io = io or StdConsole()
    logger.info("Console connector started (color=%s).", state.use_color)

    while state.running:
        try:
            io.write(ACTION_PROMPT)
            action = io.read_line().strip()
            command_registry.handle(state, action, io)
        except TaskListError as e:
            io.write(str(e))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            io.write("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            io.write("Internal error while handling the action.")

    logger.info("Console connector finished.")
