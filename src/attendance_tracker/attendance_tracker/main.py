from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import build_container
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    store_config = dict(getattr(settings, "STORE_CONFIG"))
    multi_teacher = bool(getattr(settings, "MULTI_TEACHER", True))
    logger.info(
        "settings=%s store=%s multi_teacher=%s",
        settings_module,
        store_config.get("path") or store_config.get("backend"),
        multi_teacher,
    )

    # A corrupt or unreadable data file raises StorageError here and aborts startup.
    container = build_container(store_config=store_config, multi_teacher=multi_teacher)
    app.extensions["attendance_tracker"] = container

    register_error_handlers(app)
    if multi_teacher:
        register_teachers(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    application = create_app()
    application.run(port=application.config["PORT"])
