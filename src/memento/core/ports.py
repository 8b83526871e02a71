# src/memento/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-end.

Connectors and commands depend on this Protocol instead of MemoryStore,
so a different backing store can be wired in at the composition root.
"""

from typing import Any, Protocol

from ..store.models import Event, Project, ProjectColor, TaskStatus, TaskWithProject, User


class Storage(Protocol):
    # Users
    def create_user(
            self,
            *,
            username: str,
            email: str,
            name: str,
            avatar: str | None = None,
    ) -> User: ...
    def get_user(self, user_id: str) -> User | None: ...
    def get_user_by_username(self, username: str) -> User | None: ...
    def get_user_by_email(self, email: str) -> User | None: ...
    def count_users(self) -> int: ...

    # Projects
    def create_project(self, *, name: str, color: ProjectColor | str = ...) -> Project: ...
    def get_all_projects(self) -> list[Project]: ...
    def get_project(self, project_id: str) -> Project | None: ...
    def update_project(self, project_id: str, **updates: Any) -> Project | None: ...
    def delete_project(self, project_id: str) -> bool: ...
    def count_projects(self) -> int: ...

    # Tasks (always returned with their project resolved)
    def create_task(
            self,
            *,
            title: str,
            status: TaskStatus | str = ...,
            description: str | None = None,
            project_id: str | None = None,
            task_number: str | None = None,
    ) -> TaskWithProject: ...
    def get_all_tasks(self) -> list[TaskWithProject]: ...
    def get_task(self, task_id: str) -> TaskWithProject | None: ...
    def get_tasks_by_status(self, status: TaskStatus | str) -> list[TaskWithProject]: ...
    def get_tasks_by_project(self, project_id: str) -> list[TaskWithProject]: ...
    def update_task(self, task_id: str, **updates: Any) -> TaskWithProject | None: ...
    def delete_task(self, task_id: str) -> bool: ...
    def count_tasks(self) -> int: ...

    # Events
    def create_event(
            self,
            *,
            title: str,
            scheduled_time: str,
            date: str,
            description: str | None = None,
            icon: str | None = None,
    ) -> Event: ...
    def get_all_events(self) -> list[Event]: ...
    def get_events_by_date(self, date: str) -> list[Event]: ...
    def update_event(self, event_id: str, **updates: Any) -> Event | None: ...
    def delete_event(self, event_id: str) -> bool: ...
    def count_events(self) -> int: ...
