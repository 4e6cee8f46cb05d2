from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="upsert_attendance")
    def upsert_attendance():
        """Create or overwrite the mark for (studentId, date, lesson)."""

        data = json_body()
        student = container.attendance_service.upsert_attendance(
            student_id=data.get("studentId"),
            lesson_date=data.get("date"),
            status=data.get("status"),
            lesson=data.get("lesson"),
            reason=data.get("reason"),
        )
        return jsonify(student.to_dict())
