from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    def list_teachers():
        return jsonify([t.to_dict() for t in container.teacher_service.list_teachers()])

    @app.route("/api/teachers", methods=["POST"], endpoint="add_teacher")
    def add_teacher():
        data = json_body()
        teacher = container.teacher_service.add_teacher(name=data.get("name"), subject=data.get("subject"))
        return jsonify(teacher.to_dict()), 201
