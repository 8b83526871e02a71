"""
Storage subsystem.

Components:
- models.py: entity dataclasses (User, Project, Task, TaskWithProject, Event) and enums
- memory_store.py: in-memory store with denormalize-on-read task queries
- seed.py: demo records for bootstrap
"""

from .memory_store import MemoryStore
from .models import Event, Project, ProjectColor, Task, TaskStatus, TaskWithProject, User
from .seed import seed_demo_data

__all__ = [
    "Event",
    "MemoryStore",
    "Project",
    "ProjectColor",
    "Task",
    "TaskStatus",
    "TaskWithProject",
    "User",
    "seed_demo_data",
]
