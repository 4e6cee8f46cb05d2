from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DATA_FILE
from .reports.service import ReportService
from .store.json_store import JsonFileRecordStore
from .store.manager import DatasetManager
from .store.memory_store import InMemoryRecordStore
from .store.repository import RecordStore
from .students.service import StudentService
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    datasets: DatasetManager
    multi_teacher: bool

    teacher_service: TeacherService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_store(store_config: dict) -> RecordStore:
    backend = str(store_config.get("backend", "json")).lower()
    if backend == "memory":
        return InMemoryRecordStore()
    if backend == "json":
        return JsonFileRecordStore(store_config.get("path") or DEFAULT_DATA_FILE)
    raise ValueError(f"Unknown store backend: {backend!r}")


def build_container(
    *,
    store_config: Optional[dict] = None,
    multi_teacher: bool = True,
    store: Optional[RecordStore] = None,
) -> Container:
    store = store or build_store(store_config or {})
    datasets = DatasetManager(store)
    teacher_service = TeacherService(datasets)

    return Container(
        store=store,
        datasets=datasets,
        multi_teacher=bool(multi_teacher),
        teacher_service=teacher_service,
        student_service=StudentService(datasets, require_teacher=multi_teacher),
        attendance_service=AttendanceService(datasets, require_lesson=multi_teacher),
        report_service=ReportService(datasets, teacher_service),
    )
