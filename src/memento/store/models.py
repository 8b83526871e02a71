# src/memento/store/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task status.

    There is no transition graph: any status may move to any other.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"unknown task status: {raw!r}") from None


class ProjectColor(StrEnum):
    """Color tag for a project (UI category only)."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"
    GRAY = "gray"

    @classmethod
    def parse(cls, raw: str | ProjectColor) -> ProjectColor:
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"unknown project color: {raw!r}") from None


@dataclass(frozen=True, slots=True)
class User:
    id: str
    username: str
    email: str
    name: str
    created_at: float
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class Project:
    id: str
    name: str
    color: ProjectColor
    created_at: float


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    status: TaskStatus
    created_at: float
    updated_at: float

    description: str | None = None
    project_id: str | None = None  # weak reference, never cascaded
    task_number: str | None = None


@dataclass(frozen=True, slots=True)
class TaskWithProject(Task):
    """A Task with its owning Project resolved at read time."""

    project: Project | None = None


@dataclass(frozen=True, slots=True)
class Event:
    id: str
    title: str
    scheduled_time: str  # "HH:MM"
    date: str  # opaque key, e.g. "2025-01-21"
    created_at: float

    description: str | None = None
    icon: str | None = None
