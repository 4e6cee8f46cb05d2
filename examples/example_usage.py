"""Example: drive the service layer directly (no Flask).

Controllers are thin; every rule lives in the services, so the same calls work
from a script or a shell.
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=settings.STORE_CONFIG, multi_teacher=settings.MULTI_TEACHER)

    teacher = container.teacher_service.add_teacher(name="Ms. Tamm", subject="Math")
    student = container.student_service.add_student(name="Jaan", teacher_id=teacher.teacher_id)
    container.attendance_service.upsert_attendance(
        student_id=student.student_id,
        lesson_date="2024-01-10",
        lesson="Algebra",
        status="late",
        reason="bus delay",
    )
    print(container.report_service.get_statistics(teacher.teacher_id).to_dict())


if __name__ == "__main__":
    main()
