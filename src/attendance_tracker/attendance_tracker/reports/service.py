from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import EXPORT_FILENAME_PREFIX
from ..store.manager import DatasetManager
from ..teachers.service import TeacherService
from .export import ExportTable, format_export
from .statistics import Statistics, aggregate


class ReportService:
    """Read-only use cases: statistics and export rows over the current snapshot."""

    def __init__(
        self,
        datasets: DatasetManager,
        teachers: TeacherService,
        *,
        filename_prefix: str = EXPORT_FILENAME_PREFIX,
    ):
        self._datasets = datasets
        self._teachers = teachers
        self._filename_prefix = filename_prefix

    def get_statistics(self, teacher_id: Optional[str] = None) -> Statistics:
        return aggregate(self._datasets.snapshot(), teacher_id)

    def export_rows(self, teacher_id: Optional[str] = None) -> ExportTable:
        if teacher_id is not None:
            self._teachers.get_teacher(teacher_id)
        return format_export(self._datasets.snapshot(), teacher_id)

    def export_filename(self, teacher_id: Optional[str] = None, *, today: Optional[date] = None) -> str:
        stamp = (today or today_local()).isoformat()
        if teacher_id is None:
            return f"{self._filename_prefix}_{stamp}.csv"

        teacher = self._teachers.get_teacher(teacher_id)
        return f"{self._filename_prefix}_{teacher.name}_{stamp}.csv"
