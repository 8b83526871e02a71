# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from memento.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MEMENTO_APP_NAME",
        "MEMENTO_LOG_LEVEL",
        "MEMENTO_SEED_DEMO_DATA",
        "MEMENTO_CONSOLE_ENABLED",
        "MEMENTO_DATA_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "memento"
    assert s.log_level == "INFO"
    assert s.seed_demo_data is True
    assert s.console_enabled is True
    assert s.data_dir == Path(".local/memento")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MEMENTO_APP_NAME", "planner")
    monkeypatch.setenv("MEMENTO_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MEMENTO_SEED_DEMO_DATA", "off")
    monkeypatch.setenv("MEMENTO_CONSOLE_ENABLED", "no")
    monkeypatch.setenv("MEMENTO_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "planner"
    assert s.log_level == "DEBUG"
    assert s.seed_demo_data is False
    assert s.console_enabled is False
    assert s.data_dir == tmp_path


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEMENTO_APP_NAME", "  ")
    monkeypatch.setenv("MEMENTO_DATA_DIR", "")

    s = Settings.from_env()
    assert s.app_name == "memento"
    assert s.data_dir == Path(".local/memento")
