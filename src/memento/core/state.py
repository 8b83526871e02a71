# src/memento/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import Storage


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    storage: Storage

    # Signed-in principal; None means "anonymous" (no seeded user).
    current_user_id: str | None = None

    # Serializes command handling when more than one connector shares the state.
    lock: threading.Lock = field(default_factory=threading.Lock)
