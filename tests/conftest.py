from __future__ import annotations

import pytest

from gui.controller import TaskListController

from .fakes import FakeTaskStore


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def seeded_store() -> FakeTaskStore:
    return FakeTaskStore(
        [
            {"id": "1", "task": "buy milk", "completed": False},
            {"id": "2", "task": "walk dog", "completed": True},
            {"id": "3", "task": "file taxes", "completed": False},
        ]
    )


@pytest.fixture()
def controller(store: FakeTaskStore) -> TaskListController:
    return TaskListController(store)


@pytest.fixture()
def loaded(seeded_store: FakeTaskStore) -> TaskListController:
    """Controller that has already completed its initial load."""
    ctl = TaskListController(seeded_store)
    ctl.load_all()
    seeded_store.calls.clear()
    return ctl
