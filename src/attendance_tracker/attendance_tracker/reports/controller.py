from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, send_file

from ..common.http import teacher_id_arg
from ..container import Container
from .export import ExportTable


def write_csv(table: ExportTable) -> bytes:
    """Serialize export rows; header row is written even when there are no students."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=table.columns)
    writer.writeheader()
    for row in table.rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/statistics", methods=["GET"], endpoint="statistics")
    def statistics():
        stats = container.report_service.get_statistics(teacher_id_arg())
        return jsonify(stats.to_dict())

    @app.route("/api/export", methods=["GET"], endpoint="export_csv")
    def export_csv():
        teacher_id = teacher_id_arg()
        table = container.report_service.export_rows(teacher_id)
        filename = container.report_service.export_filename(teacher_id)

        return send_file(
            io.BytesIO(write_csv(table)),
            mimetype="text/csv",
            as_attachment=True,
            download_name=filename,
        )
