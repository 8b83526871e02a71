# src/memento/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, registry: CommandRegistry | None = None) -> str | None:
    """
    Run one console line through the command registry.

    Returns the text to show, or None for an empty line.
    A crashing handler is logged and reported, never propagated.
    """
    registry = registry or command_registry
    line = line.strip()
    if not line:
        return None

    if not line.startswith("/"):
        return "Commands start with '/'. Use /help to list available commands."

    try:
        with state.lock:
            return registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed: %s", line)
        return "Internal error while handling a command."


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "memento"))
    logger.info("Console connector started (user=%s).", state.current_user_id)
    _print_ts(f"[{app_name}] Type /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(f"{app_name}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")
