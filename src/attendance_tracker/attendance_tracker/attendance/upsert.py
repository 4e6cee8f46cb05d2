from __future__ import annotations

from typing import Any, Optional

from ..common.validators import optional_text, require_iso_date, require_non_empty, require_status
from ..core.exceptions import NotFoundError, ValidationError
from ..store.model import Dataset
from ..students.model import Student
from .model import AttendanceRecord


def upsert_record(
    dataset: Dataset,
    student_id: Any,
    *,
    lesson_date: Any,
    status: Any,
    lesson: Any = None,
    reason: Any = None,
    require_lesson: bool = True,
) -> Student:
    """Insert or replace the student's record for (lesson_date, lesson).

    The last write for a key wins and keeps its earlier position in the
    history; a new key is appended. Mutates ``dataset`` in place.
    """

    student_id = require_non_empty(student_id, "Student ID")
    work_date = require_iso_date(lesson_date, "Date")
    status = require_status(status)
    lesson = optional_text(lesson)
    if require_lesson and lesson is None:
        raise ValidationError("Lesson is required")

    student = dataset.find_student(student_id)
    if student is None:
        raise NotFoundError("Student not found")

    record = AttendanceRecord(
        lesson_date=work_date,
        status=status,
        lesson=lesson,
        reason=optional_text(reason) or "",
    )

    index = student.find_record_index(record.key)
    if index is None:
        student.attendance_records.append(record)
    else:
        student.attendance_records[index] = record
    return student
