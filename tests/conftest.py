from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.core.exceptions import StorageError
from src.attendance_tracker.attendance_tracker.store.memory_store import InMemoryRecordStore


class FailingStore(InMemoryRecordStore):
    """In-memory store whose save() can be switched to fail like a full disk."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail = False

    def save(self, dataset) -> None:
        if self.fail:
            raise StorageError("disk full")
        super().save(dataset)


@pytest.fixture
def store():
    return FailingStore()


@pytest.fixture
def container(store):
    return build_container(store=store, multi_teacher=True)


@pytest.fixture
def single_teacher_container():
    return build_container(store=InMemoryRecordStore(), multi_teacher=False)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.attendance_tracker.attendance_tracker.main import create_app

    app = create_app()
    return app.test_client()
