# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FakeClock:
    """
    Deterministic clock for MemoryStore.

    - Returns `now` until moved with advance()
    - Lets tests check timestamp ordering without sleeping
    """

    now: float = 1_700_000_000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now += seconds


class ScriptedInput:
    """
    Fake `input()` for the console loop.

    Yields the given lines in order, then raises EOFError.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)
