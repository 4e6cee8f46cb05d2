from __future__ import annotations

import csv
import io
from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import NotFoundError
from src.attendance_tracker.attendance_tracker.reports.controller import write_csv
from src.attendance_tracker.attendance_tracker.reports.export import format_export
from src.attendance_tracker.attendance_tracker.store.model import Dataset
from src.attendance_tracker.attendance_tracker.students.model import Student
from src.attendance_tracker.attendance_tracker.teachers.model import Teacher


def _record(day: int, lesson, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(lesson_date=date(2024, 1, day), status=status, lesson=lesson)


@pytest.fixture
def dataset() -> Dataset:
    return Dataset(
        teachers=[Teacher(teacher_id="T1", name="Ms. Tamm", subject="Math")],
        students=[
            Student(
                student_id="S1",
                name="Jaan",
                teacher_id="T1",
                attendance_records=[
                    _record(10, "Geometry", AttendanceStatus.PRESENT),
                    _record(9, "Algebra", AttendanceStatus.ABSENT),
                    _record(10, "Algebra", AttendanceStatus.LATE),
                ],
            ),
            Student(
                student_id="S2",
                name="Mari",
                teacher_id="T1",
                attendance_records=[_record(9, "Algebra", AttendanceStatus.PRESENT)],
            ),
            Student(student_id="S3", name="Peeter", teacher_id="T1"),
            Student(
                student_id="S4",
                name="Other",
                teacher_id="T2",
                attendance_records=[_record(1, "Art", AttendanceStatus.PRESENT)],
            ),
        ],
    )


def test_columns_are_sorted_by_date_lesson_string(dataset):
    table = format_export(dataset, "T1")

    assert table.columns == [
        "Name",
        "2024-01-09 (Algebra)",
        "2024-01-10 (Algebra)",
        "2024-01-10 (Geometry)",
        "Total Absences",
        "Total Late",
        "Attendance Rate",
    ]


def test_one_row_per_filtered_student_with_na_for_missing_keys(dataset):
    table = format_export(dataset, "T1")

    assert [r["Name"] for r in table.rows] == ["Jaan", "Mari", "Peeter"]
    jaan, mari, _ = table.rows
    assert jaan == {
        "Name": "Jaan",
        "2024-01-09 (Algebra)": "absent",
        "2024-01-10 (Algebra)": "late",
        "2024-01-10 (Geometry)": "present",
        "Total Absences": 1,
        "Total Late": 1,
        "Attendance Rate": "33.33%",
    }
    assert mari["2024-01-10 (Algebra)"] == "N/A"
    assert mari["2024-01-10 (Geometry)"] == "N/A"
    assert mari["Attendance Rate"] == "100.00%"


def test_student_without_records_exports_na_rate(dataset):
    peeter = format_export(dataset, "T1").rows[2]

    assert peeter["Attendance Rate"] == "N/A"
    assert peeter["Total Absences"] == 0
    assert peeter["Total Late"] == 0
    assert set(peeter.values()) >= {"N/A"}


def test_unfiltered_export_covers_all_students(dataset):
    table = format_export(dataset)

    assert len(table.rows) == len(dataset.students)
    assert "2024-01-01 (Art)" == table.columns[1]


def test_dates_without_lessons_use_plain_date_columns():
    dataset = Dataset(
        students=[
            Student(
                student_id="S1",
                name="Jaan",
                attendance_records=[_record(11, None, AttendanceStatus.PRESENT), _record(2, None, AttendanceStatus.LATE)],
            )
        ]
    )

    table = format_export(dataset)

    assert table.columns[1:3] == ["2024-01-02", "2024-01-11"]
    assert table.rows[0]["Attendance Rate"] == "50.00%"


def test_report_service_export_checks_teacher(container):
    with pytest.raises(NotFoundError):
        container.report_service.export_rows("missing")
    with pytest.raises(NotFoundError):
        container.report_service.export_filename("missing", today=date(2024, 1, 31))


def test_export_filename_uses_teacher_name_and_date(container):
    teacher = container.teacher_service.add_teacher(name="Ms. Tamm", subject="Math")

    named = container.report_service.export_filename(teacher.teacher_id, today=date(2024, 1, 31))
    plain = container.report_service.export_filename(today=date(2024, 1, 31))

    assert named == "kohaloleku_Ms. Tamm_2024-01-31.csv"
    assert plain == "kohaloleku_2024-01-31.csv"


def test_write_csv_emits_header_even_without_rows():
    table = format_export(Dataset())

    text = write_csv(table).decode("utf-8-sig")

    assert list(csv.reader(io.StringIO(text))) == [["Name", "Total Absences", "Total Late", "Attendance Rate"]]
