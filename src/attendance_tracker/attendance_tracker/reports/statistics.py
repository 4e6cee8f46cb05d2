from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..store.model import Dataset


@dataclass(frozen=True)
class Statistics:
    student_count: int
    total_records: int
    total_present: int
    total_absent: int
    total_late: int
    attendance_rate: float
    absent_rate: float
    late_rate: float

    def to_dict(self) -> dict:
        return {
            "studentCount": self.student_count,
            "attendanceRate": self.attendance_rate,
            "absentRate": self.absent_rate,
            "lateRate": self.late_rate,
            "totalRecords": self.total_records,
            "totalPresent": self.total_present,
            "totalAbsent": self.total_absent,
            "totalLate": self.total_late,
        }


def percentage(count: int, total: int) -> float:
    """Share of ``count`` in ``total`` as a percentage, 0 when total is 0."""
    if total <= 0:
        return 0.0
    return round(count / total * 100, 2)


def aggregate(dataset: Dataset, teacher_id: Optional[str] = None) -> Statistics:
    students = dataset.students_for(teacher_id)
    counts = Counter(r.status for s in students for r in s.attendance_records)
    total = sum(len(s.attendance_records) for s in students)

    present = counts[AttendanceStatus.PRESENT]
    absent = counts[AttendanceStatus.ABSENT]
    late = counts[AttendanceStatus.LATE]

    return Statistics(
        student_count=len(students),
        total_records=total,
        total_present=present,
        total_absent=absent,
        total_late=late,
        attendance_rate=percentage(present, total),
        absent_rate=percentage(absent, total),
        late_rate=percentage(late, total),
    )
