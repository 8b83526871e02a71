# tests/test_console_connector.py

from __future__ import annotations

import logging

import pytest

from memento.cli.commands import CommandRegistry
from memento.connectors.console_connector import handle_line, run_console_loop
from memento.core.state import AppState

from .fakes import ScriptedInput


def test_handle_line_empty_and_plain_text(state: AppState) -> None:
    assert handle_line(state, "   ") is None
    assert "start with '/'" in (handle_line(state, "buy milk") or "")


def test_handle_line_reports_crashing_handler(state: AppState, caplog: pytest.LogCaptureFixture) -> None:
    reg = CommandRegistry()

    def boom(state, args):
        raise RuntimeError("boom")

    reg.register("boom", boom, "crashes")

    with caplog.at_level(logging.ERROR, logger="memento.connectors.console_connector"):
        reply = handle_line(state, "/boom", registry=reg)

    assert reply == "Internal error while handling a command."
    assert any("Command handler crashed" in r.message for r in caplog.records)
    # The lock must be released after a crash.
    assert not state.lock.locked()


def test_console_loop_runs_commands_until_exit(state: AppState, capsys: pytest.CaptureFixture[str]) -> None:
    scripted = ScriptedInput(["/task add Water plants", "", "/tasks pending", "/exit", "/status"])

    run_console_loop(state, read_line=scripted)

    out = capsys.readouterr().out
    assert "Task created: [pending]" in out
    assert "Water plants" in out
    assert "Tasks (pending): 4" in out
    # Lines after /exit are never read.
    assert len(scripted.prompts) == 4
    assert "Status:" not in out


def test_console_loop_stops_on_eof(state: AppState) -> None:
    scripted = ScriptedInput(["/help"])
    run_console_loop(state, read_line=scripted)
    assert len(scripted.prompts) == 2
    assert scripted.prompts[0] == "memento-test> "
