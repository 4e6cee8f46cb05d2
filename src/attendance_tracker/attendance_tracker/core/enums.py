from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark for one lesson, stored as its lowercase value."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
