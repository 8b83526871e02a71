# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from memento.core.state import AppState
from memento.store.memory_store import MemoryStore
from memento.store.seed import seed_demo_data

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="memento-test",
        log_level="INFO",
        seed_demo_data=True,
        console_enabled=True,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> MemoryStore:
    return MemoryStore(clock=clock)


@pytest.fixture()
def seeded_store(store: MemoryStore) -> MemoryStore:
    seed_demo_data(store)
    return store


@pytest.fixture()
def state(settings: SimpleNamespace, seeded_store: MemoryStore) -> AppState:
    """AppState over the seeded store, signed in as the demo user."""
    user = seeded_store.get_user_by_username("mide")
    assert user is not None
    return AppState(settings=settings, storage=seeded_store, current_user_id=user.id)
