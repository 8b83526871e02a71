# src/memento/core/views.py

"""Read-side helpers the front-end applies to store results."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from ..store.models import Event, TaskStatus, TaskWithProject

TASK_FILTERS: tuple[str, ...] = (
    "all",
    TaskStatus.COMPLETED.value,
    TaskStatus.IN_PROGRESS.value,
    TaskStatus.PENDING.value,
)


class _Timestamped(Protocol):
    @property
    def created_at(self) -> float: ...


T = TypeVar("T", bound=_Timestamped)


def filter_tasks(tasks: Iterable[TaskWithProject], status_filter: str) -> list[TaskWithProject]:
    """'all' keeps everything; anything else is an exact status match."""
    if status_filter == "all":
        return list(tasks)
    return [t for t in tasks if t.status == status_filter]


def status_counts(tasks: Iterable[TaskWithProject]) -> dict[TaskStatus, int]:
    counts = {s: 0 for s in TaskStatus}
    for t in tasks:
        counts[t.status] += 1
    return counts


def group_events_by_date(events: Iterable[Event]) -> dict[str, list[Event]]:
    """
    Group events by their date key.

    Dates ascend (plain string order, fine for ISO dates); events inside a day
    are ordered by scheduled_time.
    """
    grouped: dict[str, list[Event]] = {}
    for e in sorted(events, key=lambda e: (e.date, e.scheduled_time)):
        grouped.setdefault(e.date, []).append(e)
    return grouped


def newest_first(records: Sequence[T]) -> list[T]:
    return sorted(records, key=lambda r: r.created_at, reverse=True)
