# src/memento/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- builds the store (optionally seeded) and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..store.memory_store import MemoryStore
from ..store.seed import seed_demo_data

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, storage=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test and avoids
    a process-wide store singleton. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    current_user_id: str | None = None
    if storage is None:
        store = MemoryStore()
        if getattr(settings, "seed_demo_data", False):
            current_user_id = seed_demo_data(store).id
        storage = store

    logger.info(
        "State ready: seeded=%s user=%s",
        current_user_id is not None,
        current_user_id,
    )
    return AppState(settings=settings, storage=storage, current_user_id=current_user_id)
