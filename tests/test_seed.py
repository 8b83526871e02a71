# tests/test_seed.py

from __future__ import annotations

from memento.store.memory_store import MemoryStore
from memento.store.models import TaskStatus
from memento.store.seed import seed_demo_data


def test_seeded_store_counts(seeded_store: MemoryStore) -> None:
    assert seeded_store.count_users() == 1
    assert len(seeded_store.get_all_projects()) == 4
    assert len(seeded_store.get_all_tasks()) == 6
    assert len(seeded_store.get_events_by_date("2025-01-21")) == 3
    assert len(seeded_store.get_events_by_date("2025-01-22")) == 1


def test_seeded_tasks_reference_seeded_projects(seeded_store: MemoryStore) -> None:
    tasks = seeded_store.get_all_tasks()
    assert [t.task_number for t in tasks] == [f"Task #{n}" for n in range(1, 7)]
    assert all(t.project is not None for t in tasks)

    by_project: dict[str, int] = {}
    for t in tasks:
        assert t.project is not None
        by_project[t.project.name] = by_project.get(t.project.name, 0) + 1
    assert by_project == {"User Experience Design": 4, "Icon Pack Update": 2}


def test_seeded_status_mix(seeded_store: MemoryStore) -> None:
    assert len(seeded_store.get_tasks_by_status(TaskStatus.COMPLETED)) == 1
    assert len(seeded_store.get_tasks_by_status(TaskStatus.IN_PROGRESS)) == 2
    assert len(seeded_store.get_tasks_by_status(TaskStatus.PENDING)) == 3


def test_seed_returns_user() -> None:
    store = MemoryStore()
    user = seed_demo_data(store)
    assert store.get_user(user.id) == user
    assert store.get_user_by_email("manager@gmail.com") == user
