from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import Granularity
from ..registry.repository import RegistryRepository
from ..settings.model import ChurchSettings, EngineSettings
from .aggregation import aggregate_total, class_attendance_bars, dashboard_stats, rank_classes
from .model import ClassAttendanceBar, ClassReportRow, DashboardStats, StudentRankRow
from .ranking import filter_ranking, podium_by_class, rank_students
from .temporal import DateWindow, PeriodWindow
from .trends.builder import TrendSeries


@dataclass(frozen=True)
class GeneralReport:
    church_name: str
    address: str
    period_label: str
    rows: list[ClassReportRow]
    total: ClassReportRow


@dataclass(frozen=True)
class DashboardView:
    period_label: str
    granularity: Granularity
    stats: DashboardStats
    class_attendance: list[ClassAttendanceBar]
    trend: TrendSeries


@dataclass(frozen=True)
class StudentRanking:
    period_label: str
    rows: list[StudentRankRow]
    enrolled_by_class: dict[str, int]


class ReportService:
    """Use case: build dashboard and report read-models from store snapshots.

    Every call reloads the full collections and recomputes from scratch.
    """

    def __init__(
        self,
        registry: RegistryRepository,
        attendance: AttendanceRepository,
        *,
        settings: Optional[EngineSettings] = None,
    ):
        self._registry = registry
        self._attendance = attendance
        self._settings = settings or EngineSettings()

    def build_dashboard(self, *, granularity: Granularity, reference: date) -> DashboardView:
        students = self._registry.list_students()
        classes = self._registry.list_classes()
        records = self._attendance.list_all()
        window = PeriodWindow(granularity, reference)

        return DashboardView(
            period_label=window.label,
            granularity=granularity,
            stats=dashboard_stats(students, records, window),
            class_attendance=class_attendance_bars(classes, records, window),
            trend=TrendSeries(records, classes, granularity, reference),
        )

    def build_general_report(self, *, window: DateWindow, church: Optional[ChurchSettings] = None) -> GeneralReport:
        church = church or ChurchSettings()
        rows = rank_classes(
            self._registry.list_classes(),
            self._attendance.list_all(),
            self._registry.list_students(),
            window,
        )
        return GeneralReport(
            church_name=church.church_name,
            address=church.address,
            period_label=window.label,
            rows=rows,
            total=aggregate_total(rows),
        )

    def build_student_ranking(
        self,
        *,
        window: DateWindow,
        search: Optional[str] = None,
        class_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> StudentRanking:
        students = self._registry.list_students()
        classes = self._registry.list_classes()
        records = self._attendance.list_all()

        ranked = rank_students(students, records, classes, window)
        rows = filter_ranking(
            ranked,
            search=search,
            class_id=class_id,
            limit=self._settings.ranking_limit if limit is None else limit,
        )
        class_rows = rank_classes(classes, records, students, window)
        return StudentRanking(
            period_label=window.label,
            rows=rows,
            enrolled_by_class={r.class_id: r.enrolled_count for r in class_rows},
        )

    def build_podium(self, *, window: DateWindow, search: Optional[str] = None) -> dict[str, list[StudentRankRow]]:
        classes = self._registry.list_classes()
        ranked = rank_students(self._registry.list_students(), self._attendance.list_all(), classes, window)
        return podium_by_class(filter_ranking(ranked, search=search), classes, size=self._settings.podium_size)
