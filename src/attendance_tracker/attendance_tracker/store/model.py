from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..students.model import Student
from ..teachers.model import Teacher


@dataclass
class Dataset:
    """Whole persisted state: teachers plus students with embedded history."""

    teachers: list[Teacher] = field(default_factory=list)
    students: list[Student] = field(default_factory=list)

    def find_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return next((t for t in self.teachers if t.teacher_id == teacher_id), None)

    def find_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self.students if s.student_id == student_id), None)

    def students_for(self, teacher_id: Optional[str] = None) -> list[Student]:
        if teacher_id is None:
            return list(self.students)
        return [s for s in self.students if s.teacher_id == teacher_id]

    def to_dict(self) -> dict:
        return {
            "teachers": [t.to_dict() for t in self.teachers],
            "students": [s.to_dict() for s in self.students],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Dataset":
        if not isinstance(data, dict):
            raise ValueError("Dataset root must be an object")
        return cls(
            teachers=[Teacher.from_dict(t) for t in data.get("teachers") or []],
            students=[Student.from_dict(s) for s in data.get("students") or []],
        )
