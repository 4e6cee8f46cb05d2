from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import RecordKey
from ..core.constants import NOT_AVAILABLE
from ..core.enums import AttendanceStatus
from ..store.model import Dataset
from ..students.model import Student

NAME_COLUMN = "Name"
ABSENCES_COLUMN = "Total Absences"
LATE_COLUMN = "Total Late"
RATE_COLUMN = "Attendance Rate"


@dataclass(frozen=True)
class ExportTable:
    """Read-model for tabular export: header order plus one dict per student."""

    columns: list[str]
    rows: list[dict]


def column_sort_key(key: RecordKey) -> str:
    # Lesson-qualified keys sort by the joined string, not by date then lesson.
    lesson_date, lesson = key
    if lesson is None:
        return lesson_date.isoformat()
    return f"{lesson_date.isoformat()}-{lesson}"


def column_header(key: RecordKey) -> str:
    lesson_date, lesson = key
    if lesson is None:
        return lesson_date.isoformat()
    return f"{lesson_date.isoformat()} ({lesson})"


def _student_row(student: Student, keys: list[RecordKey]) -> dict:
    by_key = {r.key: r for r in student.attendance_records}

    row = {NAME_COLUMN: student.name}
    for key in keys:
        record = by_key.get(key)
        row[column_header(key)] = record.status.value if record else NOT_AVAILABLE

    total = len(student.attendance_records)
    present = student.count_status(AttendanceStatus.PRESENT)
    row[ABSENCES_COLUMN] = student.count_status(AttendanceStatus.ABSENT)
    row[LATE_COLUMN] = student.count_status(AttendanceStatus.LATE)
    row[RATE_COLUMN] = f"{present / total * 100:.2f}%" if total else NOT_AVAILABLE
    return row


def format_export(dataset: Dataset, teacher_id: Optional[str] = None) -> ExportTable:
    """Pivot attendance history into one row per student.

    Every distinct (date, lesson) key seen among the selected students becomes
    a column; students without a record for a key get "N/A" there.
    """

    students = dataset.students_for(teacher_id)
    keys = sorted({r.key for s in students for r in s.attendance_records}, key=column_sort_key)

    columns = [NAME_COLUMN, *(column_header(k) for k in keys), ABSENCES_COLUMN, LATE_COLUMN, RATE_COLUMN]
    rows = [_student_row(s, keys) for s in students]
    return ExportTable(columns=columns, rows=rows)
