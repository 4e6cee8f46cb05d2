from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from ..store.manager import DatasetManager
from ..students.model import Student
from .upsert import upsert_record

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark a student present, absent or late for a lesson."""

    def __init__(self, datasets: DatasetManager, *, require_lesson: bool = True):
        self._datasets = datasets
        self._require_lesson = bool(require_lesson)

    def upsert_attendance(
        self,
        *,
        student_id: Any,
        lesson_date: Any,
        status: Any,
        lesson: Optional[Any] = None,
        reason: Optional[Any] = None,
    ) -> Student:
        with self._datasets.transaction() as dataset:
            student = upsert_record(
                dataset,
                student_id,
                lesson_date=lesson_date,
                status=status,
                lesson=lesson,
                reason=reason,
                require_lesson=self._require_lesson,
            )

        logger.info("Attendance saved for student %s (%d records)", student.student_id, len(student.attendance_records))
        return copy.deepcopy(student)
