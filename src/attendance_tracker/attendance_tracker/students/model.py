from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceRecord, RecordKey
from ..core.enums import AttendanceStatus


@dataclass
class Student:
    """Domain entity: Student with its embedded attendance history.

    Note: attendance_records is mutated only by the upsert engine.
    """

    student_id: str
    name: str
    teacher_id: Optional[str] = None
    attendance_records: list[AttendanceRecord] = field(default_factory=list)

    def find_record_index(self, key: RecordKey) -> Optional[int]:
        for index, record in enumerate(self.attendance_records):
            if record.key == key:
                return index
        return None

    def count_status(self, status: AttendanceStatus) -> int:
        return sum(1 for r in self.attendance_records if r.status == status)

    def to_dict(self) -> dict:
        out = {"id": self.student_id, "name": self.name}
        if self.teacher_id is not None:
            out["teacherId"] = self.teacher_id
        out["attendanceRecords"] = [r.to_dict() for r in self.attendance_records]
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        records = [AttendanceRecord.from_dict(r) for r in data.get("attendanceRecords") or []]
        seen: set[RecordKey] = set()
        for record in records:
            if record.key in seen:
                raise ValueError(f"Student {data['id']} has more than one record for {record.key}")
            seen.add(record.key)

        return cls(
            student_id=str(data["id"]),
            name=data["name"],
            teacher_id=data.get("teacherId"),
            attendance_records=records,
        )
