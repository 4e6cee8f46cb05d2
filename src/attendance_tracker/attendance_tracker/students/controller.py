from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, teacher_id_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        students = container.student_service.list_students(teacher_id_arg())
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        data = json_body()
        student = container.student_service.add_student(name=data.get("name"), teacher_id=data.get("teacherId"))
        return jsonify(student.to_dict()), 201
