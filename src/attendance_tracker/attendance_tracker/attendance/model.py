from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus

RecordKey = tuple[date, Optional[str]]


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark, owned by a Student.

    Identity inside the owning student is (lesson_date, lesson); lesson is
    None when lessons are not tracked.
    """

    lesson_date: date
    status: AttendanceStatus
    lesson: Optional[str] = None
    reason: str = ""

    @property
    def key(self) -> RecordKey:
        return (self.lesson_date, self.lesson)

    def to_dict(self) -> dict:
        out = {"date": self.lesson_date.isoformat()}
        if self.lesson is not None:
            out["lesson"] = self.lesson
        out["status"] = self.status.value
        out["reason"] = self.reason
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        return cls(
            lesson_date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
            lesson=data.get("lesson"),
            reason=data.get("reason") or "",
        )
