# src/memento/store/seed.py

"""
Demo records inserted at bootstrap so the console has something to show.

Not part of the store contract: an empty store is equally valid.
"""

from __future__ import annotations

import logging

from .memory_store import MemoryStore
from .models import ProjectColor, TaskStatus, User

logger = logging.getLogger(__name__)

DEMO_AVATAR = (
    "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
    "?auto=format&fit=crop&w=100&h=100"
)

DEMO_PROJECTS: list[tuple[str, ProjectColor]] = [
    ("User Experience Design", ProjectColor.BLUE),
    ("Design Systems", ProjectColor.GREEN),
    ("Icon Pack Update", ProjectColor.RED),
    ("Website Redesign", ProjectColor.GREEN),
]

_RESEARCH_BLURB = (
    "Using the necessary information gathered to conduct user interviews "
    "with users to get or deduce the user problems."
)

# (title, description, status, index into DEMO_PROJECTS)
DEMO_TASKS: list[tuple[str, str, TaskStatus, int]] = [
    (
        "User Research",
        "Gathering resourceful information from and for products and trying to "
        "deduce and look out for user problems needing solution.",
        TaskStatus.COMPLETED,
        0,
    ),
    ("Conduct User Interviews", _RESEARCH_BLURB, TaskStatus.PENDING, 0),
    (
        "Drawing Wireframes",
        "Connecting information architecture to visual design, creating blueprints "
        "to establish structure and flow of possible design solutions.",
        TaskStatus.IN_PROGRESS,
        0,
    ),
    ("Information Architecture", _RESEARCH_BLURB, TaskStatus.PENDING, 2),
    ("Creating High Fidelity Design", _RESEARCH_BLURB, TaskStatus.PENDING, 2),
    ("Documenting Design Process", _RESEARCH_BLURB, TaskStatus.IN_PROGRESS, 0),
]

# (title, scheduled_time, date, icon)
DEMO_EVENTS: list[tuple[str, str, str, str]] = [
    ("Portfolio Review", "15:00", "2025-01-21", "fas fa-briefcase"),
    ("Meeting with friends", "20:00", "2025-01-21", "fas fa-users"),
    ("Druids Alpha Class", "22:00", "2025-01-21", "fas fa-graduation-cap"),
    ("Illustration Design", "00:00", "2025-01-22", "fas fa-paint-brush"),
]


def seed_demo_data(store: MemoryStore) -> User:
    """Populate `store` with the demo user, projects, tasks and events. Returns the user."""
    user = store.create_user(
        username="mide",
        email="manager@gmail.com",
        name="Mide",
        avatar=DEMO_AVATAR,
    )

    projects = [store.create_project(name=name, color=color) for name, color in DEMO_PROJECTS]

    for n, (title, description, status, project_idx) in enumerate(DEMO_TASKS, start=1):
        store.create_task(
            title=title,
            description=description,
            status=status,
            project_id=projects[project_idx].id,
            task_number=f"Task #{n}",
        )

    for title, scheduled_time, date, icon in DEMO_EVENTS:
        store.create_event(
            title=title,
            description="",
            scheduled_time=scheduled_time,
            date=date,
            icon=icon,
        )

    logger.info(
        "Seeded demo data: users=%d projects=%d tasks=%d events=%d",
        store.count_users(),
        store.count_projects(),
        store.count_tasks(),
        store.count_events(),
    )
    return user
