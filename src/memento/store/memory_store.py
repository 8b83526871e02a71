# src/memento/store/memory_store.py

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections.abc import Callable
from dataclasses import fields, replace
from typing import Any

from .models import Event, Project, ProjectColor, Task, TaskStatus, TaskWithProject, User

logger = logging.getLogger(__name__)

_TASK_UPDATABLE = frozenset({"title", "description", "status", "project_id", "task_number"})
_PROJECT_UPDATABLE = frozenset({"name", "color"})
_EVENT_UPDATABLE = frozenset({"title", "description", "scheduled_time", "date", "icon"})

# Fields that may be changed but never cleared.
_TASK_REQUIRED = frozenset({"title", "status"})
_PROJECT_REQUIRED = frozenset({"name", "color"})
_EVENT_REQUIRED = frozenset({"title", "scheduled_time", "date"})

# Smallest step that still survives float round-trips for epoch seconds.
_MIN_TICK = 1e-6


class MemoryStore:
    """
    In-memory store for users, projects, tasks and events.

    Contract:
    - every read/mutation by id is total: a missing record yields None
      (or False for deletes), never an exception
    - tasks keep only a weak project_id; the Project is joined in on every read,
      so a renamed or deleted project is reflected immediately
    - deleting a project does not touch referencing tasks (no cascade)

    Thread-safety:
    - one re-entrant lock serializes every operation, so a task read always
      observes a consistent project snapshot

    Records are frozen dataclasses. Mutations store a replacement record.
    """

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = threading.RLock()

        self._users: dict[str, User] = {}
        self._projects: dict[str, Project] = {}
        self._tasks: dict[str, Task] = {}
        self._events: dict[str, Event] = {}

        # Issued ids are never reused, even after delete.
        self._issued: set[str] = set()

        logger.info("MemoryStore ready (empty)")

    # ---- low-level helpers ----

    def _new_id(self) -> str:
        while True:
            new_id = str(uuid.uuid4())
            if new_id not in self._issued:
                self._issued.add(new_id)
                return new_id

    def _now(self) -> float:
        return float(self._clock())

    def _touch(self, previous: float) -> float:
        # updated_at strictly increases, even if the clock stalls or goes back.
        now = self._now()
        if now <= previous:
            now = previous + _MIN_TICK
        return now

    def _with_project(self, task: Task) -> TaskWithProject:
        project = self._projects.get(task.project_id) if task.project_id else None
        values = {f.name: getattr(task, f.name) for f in fields(Task)}
        return TaskWithProject(**values, project=project)

    @staticmethod
    def _check_fields(
        updates: dict[str, Any],
        allowed: frozenset[str],
        required: frozenset[str],
        entity: str,
    ) -> None:
        unknown = set(updates) - allowed
        if unknown:
            raise ValueError(f"cannot update {entity} field(s): {', '.join(sorted(unknown))}")
        cleared = {k for k in required if k in updates and updates[k] is None}
        if cleared:
            raise ValueError(f"{entity} field(s) cannot be None: {', '.join(sorted(cleared))}")

    # ---- users ----

    def create_user(
        self,
        *,
        username: str,
        email: str,
        name: str,
        avatar: str | None = None,
    ) -> User:
        with self._lock:
            user = User(
                id=self._new_id(),
                username=username,
                email=email,
                name=name,
                avatar=avatar,
                created_at=self._now(),
            )
            self._users[user.id] = user
            logger.debug("User created id=%s username=%s", user.id, username)
            return user

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    # ---- projects ----

    def create_project(self, *, name: str, color: ProjectColor | str = ProjectColor.BLUE) -> Project:
        color = ProjectColor.parse(color)
        with self._lock:
            project = Project(id=self._new_id(), name=name, color=color, created_at=self._now())
            self._projects[project.id] = project
            logger.debug("Project created id=%s name=%s color=%s", project.id, name, color.value)
            return project

    def get_all_projects(self) -> list[Project]:
        with self._lock:
            return list(self._projects.values())

    def get_project(self, project_id: str) -> Project | None:
        with self._lock:
            return self._projects.get(project_id)

    def update_project(self, project_id: str, **updates: Any) -> Project | None:
        self._check_fields(updates, _PROJECT_UPDATABLE, _PROJECT_REQUIRED, "project")
        if "color" in updates:
            updates["color"] = ProjectColor.parse(updates["color"])

        with self._lock:
            existing = self._projects.get(project_id)
            if existing is None:
                return None
            updated = replace(existing, **updates)
            self._projects[project_id] = updated
            logger.debug("Project updated id=%s fields=%s", project_id, sorted(updates))
            return updated

    def delete_project(self, project_id: str) -> bool:
        """Remove a project. Tasks pointing at it are left as dangling references."""
        with self._lock:
            removed = self._projects.pop(project_id, None) is not None
            if removed:
                logger.debug("Project deleted id=%s", project_id)
            return removed

    def count_projects(self) -> int:
        with self._lock:
            return len(self._projects)

    # ---- tasks ----

    def create_task(
        self,
        *,
        title: str,
        status: TaskStatus | str = TaskStatus.PENDING,
        description: str | None = None,
        project_id: str | None = None,
        task_number: str | None = None,
    ) -> TaskWithProject:
        status = TaskStatus.parse(status)
        with self._lock:
            now = self._now()
            task = Task(
                id=self._new_id(),
                title=title,
                status=status,
                created_at=now,
                updated_at=now,
                description=description,
                project_id=project_id,
                task_number=task_number,
            )
            self._tasks[task.id] = task
            logger.debug(
                "Task created id=%s status=%s project_id=%s",
                task.id,
                status.value,
                project_id,
            )
            return self._with_project(task)

    def get_all_tasks(self) -> list[TaskWithProject]:
        with self._lock:
            return [self._with_project(t) for t in self._tasks.values()]

    def get_task(self, task_id: str) -> TaskWithProject | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return self._with_project(task) if task is not None else None

    def get_tasks_by_status(self, status: TaskStatus | str) -> list[TaskWithProject]:
        return [t for t in self.get_all_tasks() if t.status == status]

    def get_tasks_by_project(self, project_id: str) -> list[TaskWithProject]:
        return [t for t in self.get_all_tasks() if t.project_id == project_id]

    def update_task(self, task_id: str, **updates: Any) -> TaskWithProject | None:
        """
        Merge `updates` over the stored task and refresh updated_at.

        Passing None for an optional field clears it.
        Returns None if the task does not exist.
        """
        self._check_fields(updates, _TASK_UPDATABLE, _TASK_REQUIRED, "task")
        if "status" in updates:
            updates["status"] = TaskStatus.parse(updates["status"])

        with self._lock:
            existing = self._tasks.get(task_id)
            if existing is None:
                return None
            updated = replace(existing, **updates, updated_at=self._touch(existing.updated_at))
            self._tasks[task_id] = updated
            logger.debug("Task updated id=%s fields=%s", task_id, sorted(updates))
            return self._with_project(updated)

    def delete_task(self, task_id: str) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None) is not None
            if removed:
                logger.debug("Task deleted id=%s", task_id)
            return removed

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- events ----

    def create_event(
        self,
        *,
        title: str,
        scheduled_time: str,
        date: str,
        description: str | None = None,
        icon: str | None = None,
    ) -> Event:
        with self._lock:
            event = Event(
                id=self._new_id(),
                title=title,
                scheduled_time=scheduled_time,
                date=date,
                description=description,
                icon=icon,
                created_at=self._now(),
            )
            self._events[event.id] = event
            logger.debug("Event created id=%s date=%s time=%s", event.id, date, scheduled_time)
            return event

    def get_all_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def get_events_by_date(self, date: str) -> list[Event]:
        """Exact string match on `date`; no ranges, no timezone handling."""
        with self._lock:
            return [e for e in self._events.values() if e.date == date]

    def update_event(self, event_id: str, **updates: Any) -> Event | None:
        """Merge `updates` over the stored event. Returns None if it does not exist."""
        self._check_fields(updates, _EVENT_UPDATABLE, _EVENT_REQUIRED, "event")

        with self._lock:
            existing = self._events.get(event_id)
            if existing is None:
                return None
            updated = replace(existing, **updates)
            self._events[event_id] = updated
            logger.debug("Event updated id=%s fields=%s", event_id, sorted(updates))
            return updated

    def delete_event(self, event_id: str) -> bool:
        with self._lock:
            removed = self._events.pop(event_id, None) is not None
            if removed:
                logger.debug("Event deleted id=%s", event_id)
            return removed

    def count_events(self) -> int:
        with self._lock:
            return len(self._events)
