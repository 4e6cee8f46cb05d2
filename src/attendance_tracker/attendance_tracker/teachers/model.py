from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Domain entity: Teacher. Immutable once created."""

    teacher_id: str
    name: str
    subject: str

    def to_dict(self) -> dict:
        return {"id": self.teacher_id, "name": self.name, "subject": self.subject}

    @classmethod
    def from_dict(cls, data: dict) -> "Teacher":
        return cls(teacher_id=str(data["id"]), name=data["name"], subject=data["subject"])
