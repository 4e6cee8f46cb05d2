from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from ..common.identifiers import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..store.manager import DatasetManager
from .model import Student

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: enrol students and list them per teacher.

    With ``require_teacher`` (multi-teacher mode) every student must belong to
    an existing teacher.
    """

    def __init__(self, datasets: DatasetManager, *, require_teacher: bool = True):
        self._datasets = datasets
        self._require_teacher = bool(require_teacher)

    def add_student(self, *, name: Any, teacher_id: Optional[Any] = None) -> Student:
        name = require_non_empty(name, "Student name")
        teacher_id = optional_text(teacher_id)
        if self._require_teacher and teacher_id is None:
            raise ValidationError("Teacher ID is required")

        with self._datasets.transaction() as dataset:
            if teacher_id is not None and dataset.find_teacher(teacher_id) is None:
                raise NotFoundError("Teacher not found")

            student = Student(student_id=new_id(), name=name, teacher_id=teacher_id)
            dataset.students.append(student)

        logger.info("Student %s added (teacher=%s)", student.student_id, teacher_id or "-")
        return copy.deepcopy(student)

    def list_students(self, teacher_id: Optional[str] = None) -> list[Student]:
        return copy.deepcopy(self._datasets.snapshot().students_for(teacher_id))
