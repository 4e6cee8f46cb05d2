from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def teacher_id_arg() -> Optional[str]:
    return (request.args.get("teacherId") or "").strip() or None


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _invalid_input(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StorageError)
    def _storage_failure(e: StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.path, e)
        return jsonify({"error": "Could not save attendance data"}), 500
