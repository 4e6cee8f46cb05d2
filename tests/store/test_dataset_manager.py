from __future__ import annotations

import threading

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import StorageError, ValidationError
from src.attendance_tracker.attendance_tracker.store.manager import DatasetManager
from src.attendance_tracker.attendance_tracker.teachers.model import Teacher


def test_transaction_saves_and_swaps_in_new_snapshot(store):
    datasets = DatasetManager(store)
    before = datasets.snapshot()

    with datasets.transaction() as dataset:
        dataset.teachers.append(Teacher(teacher_id="T1", name="A", subject="Math"))

    assert store.save_count == 1
    assert before.teachers == []
    assert [t.teacher_id for t in datasets.snapshot().teachers] == ["T1"]
    assert store.snapshot()["teachers"][0]["id"] == "T1"


def test_exception_inside_transaction_discards_changes(store):
    datasets = DatasetManager(store)

    with pytest.raises(ValidationError):
        with datasets.transaction() as dataset:
            dataset.teachers.append(Teacher(teacher_id="T1", name="A", subject="Math"))
            raise ValidationError("nope")

    assert store.save_count == 0
    assert datasets.snapshot().teachers == []


def test_failed_save_leaves_memory_untouched(store):
    datasets = DatasetManager(store)
    store.fail = True

    with pytest.raises(StorageError):
        with datasets.transaction() as dataset:
            dataset.teachers.append(Teacher(teacher_id="T1", name="A", subject="Math"))

    assert datasets.snapshot().teachers == []
    assert store.snapshot()["teachers"] == []


def test_concurrent_writers_do_not_lose_updates(container):
    teacher = container.teacher_service.add_teacher(name="Ms. Tamm", subject="Math")
    student = container.student_service.add_student(name="Jaan", teacher_id=teacher.teacher_id)

    def mark(day: int) -> None:
        container.attendance_service.upsert_attendance(
            student_id=student.student_id,
            lesson_date=f"2024-01-{day:02d}",
            status="present",
            lesson="Algebra",
        )

    threads = [threading.Thread(target=mark, args=(day,)) for day in range(1, 21)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    records = container.datasets.snapshot().find_student(student.student_id).attendance_records
    assert len(records) == 20
