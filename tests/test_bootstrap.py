# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

from memento.cli.bootstrap import create_initial_state
from memento.logging_setup import _ConsoleNoiseFilter, setup_logging
from memento.store.memory_store import MemoryStore


def test_create_initial_state_seeds_and_signs_in(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.current_user_id is not None
    user = state.storage.get_user(state.current_user_id)
    assert user is not None
    assert user.username == "mide"
    assert state.storage.count_tasks() == 6


def test_create_initial_state_without_seed(settings: SimpleNamespace) -> None:
    settings.seed_demo_data = False
    state = create_initial_state(settings=settings)

    assert state.current_user_id is None
    assert state.storage.count_projects() == 0


def test_states_do_not_share_a_store(settings: SimpleNamespace) -> None:
    a = create_initial_state(settings=settings)
    b = create_initial_state(settings=settings)

    a.storage.create_task(title="only in a")
    assert a.storage.count_tasks() == 7
    assert b.storage.count_tasks() == 6


def test_injected_storage_is_used_as_is(settings: SimpleNamespace) -> None:
    store = MemoryStore()
    state = create_initial_state(settings=settings, storage=store)
    assert state.storage is store
    assert store.count_users() == 0


def test_setup_logging_writes_file(settings: SimpleNamespace) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=settings.data_dir)
        logging.getLogger("memento.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file.read_text("utf-8").count("hello file") == 1
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_console_filtered_file_unfiltered(settings: SimpleNamespace) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=settings.data_dir)
        console, file_handler = root.handlers
        assert isinstance(console, logging.StreamHandler)
        assert isinstance(file_handler, logging.FileHandler)
        assert console.level == logging.INFO
        assert file_handler.level == logging.DEBUG
        assert any(isinstance(f, _ConsoleNoiseFilter) for f in console.filters)
        assert file_handler.filters == []
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_console_noise_filter() -> None:
    f = _ConsoleNoiseFilter()

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(record("memento.cli.main", logging.DEBUG))
    assert not f.filter(record("memento.store.memory_store", logging.DEBUG))
    assert f.filter(record("memento.store.memory_store", logging.INFO))
    assert not f.filter(record("py.warnings", logging.WARNING))
    assert not f.filter(record("urllib3", logging.WARNING))
    assert f.filter(record("urllib3", logging.ERROR))
