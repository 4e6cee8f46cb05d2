from __future__ import annotations

import logging
from typing import Any

from ..common.identifiers import new_id
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..store.manager import DatasetManager
from .model import Teacher

logger = logging.getLogger(__name__)


class TeacherService:
    """Use case: register teachers and look them up."""

    def __init__(self, datasets: DatasetManager):
        self._datasets = datasets

    def add_teacher(self, *, name: Any, subject: Any) -> Teacher:
        name = require_non_empty(name, "Teacher name")
        subject = require_non_empty(subject, "Subject")

        teacher = Teacher(teacher_id=new_id(), name=name, subject=subject)
        with self._datasets.transaction() as dataset:
            dataset.teachers.append(teacher)

        logger.info("Teacher %s added (%s)", teacher.teacher_id, teacher.subject)
        return teacher

    def list_teachers(self) -> list[Teacher]:
        return list(self._datasets.snapshot().teachers)

    def get_teacher(self, teacher_id: str) -> Teacher:
        teacher = self._datasets.snapshot().find_teacher(teacher_id)
        if teacher is None:
            raise NotFoundError("Teacher not found")
        return teacher
