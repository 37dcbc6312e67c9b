from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.ebd_gestor.ebd_gestor.attendance.model import AttendanceRecord
from src.ebd_gestor.ebd_gestor.core.enums import Granularity
from src.ebd_gestor.ebd_gestor.registry.model import ClassRoom, Student
from src.ebd_gestor.ebd_gestor.reports.service import ReportService
from src.ebd_gestor.ebd_gestor.reports.temporal import DateRangeWindow
from src.ebd_gestor.ebd_gestor.settings.model import ChurchSettings, EngineSettings


class FakeRegistryRepo:
    def __init__(self, students, classes):
        self._students = students
        self._classes = classes

    def list_students(self):
        return list(self._students)

    def list_classes(self):
        return list(self._classes)

    def list_teachers(self):
        return []

    def set_active(self, student_id, *, is_active):
        return False


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records
        self.calls = 0

    def list_all(self):
        self.calls += 1
        return list(self._records)


def _service(**settings):
    classes = [ClassRoom(class_id="c1", name="Jovens"), ClassRoom(class_id="c2", name="Adultos")]
    students = [
        Student(student_id="s1", name="Ana", birth_date="", class_id="c1"),
        Student(student_id="s2", name="Bruno", birth_date="", class_id="c1"),
        Student(student_id="s3", name="Carla", birth_date="", class_id="c2"),
        Student(student_id="s4", name="Davi", birth_date="", class_id="c2", active=False),
    ]
    records = [
        AttendanceRecord(
            session_date="2024-05-05",
            class_id="c1",
            present_student_ids=("s1", "s2"),
            visitors_count=1,
            offering_value=Decimal("10.00"),
        ),
        AttendanceRecord(session_date="2024-05-12", class_id="c1", present_student_ids=("s1",)),
        AttendanceRecord(session_date="2024-05-12", class_id="c2", present_student_ids=()),
        AttendanceRecord(session_date="2024-06-02", class_id="c2", present_student_ids=("s3",), visitors_count=4),
    ]
    attendance = FakeAttendanceRepo(records)
    svc = ReportService(FakeRegistryRepo(students, classes), attendance, settings=EngineSettings(**settings))
    return svc, attendance


def test_general_report_rows_and_total():
    svc, _ = _service()
    church = ChurchSettings(church_name="Igreja Exemplo", address="Rua 1")

    report = svc.build_general_report(window=DateRangeWindow(start=date(2024, 5, 1), end=date(2024, 5, 31)), church=church)

    assert report.church_name == "Igreja Exemplo"
    assert report.period_label == "Período: 01/05/2024 até 31/05/2024"
    assert [(r.class_id, r.total_present, r.percentage) for r in report.rows] == [("c1", 3, 75.0), ("c2", 0, 0.0)]
    assert report.total.class_id is None
    assert report.total.potential_presence == 5
    assert report.total.percentage == 60.0
    assert report.total.total_offerings == Decimal("10.00")


def test_dashboard_for_month():
    svc, _ = _service()

    view = svc.build_dashboard(granularity=Granularity.MONTH, reference=date(2024, 5, 20))

    assert view.period_label == "Maio 2024"
    assert view.stats.total_present == 3
    assert view.stats.records_count == 3
    assert view.stats.avg_attendance == 1
    assert view.stats.active_students_count == 3
    assert [p.label for p in view.trend] == ["05", "12"]
    assert view.class_attendance[0].class_id == "c1"


def test_student_ranking_uses_default_limit():
    svc, _ = _service(ranking_limit=2)

    ranking = svc.build_student_ranking(window=DateRangeWindow())

    assert [r.student_id for r in ranking.rows] == ["s1", "s2"]
    assert ranking.enrolled_by_class == {"c1": 2, "c2": 1}
    assert ranking.period_label == "Histórico Completo"


def test_student_ranking_explicit_limit_and_class():
    svc, _ = _service()

    ranking = svc.build_student_ranking(window=DateRangeWindow(), class_id="c1", limit=10)

    assert [(r.student_id, r.position) for r in ranking.rows] == [("s1", 1), ("s2", 2)]


def test_every_report_reloads_the_store():
    svc, attendance = _service()

    svc.build_general_report(window=DateRangeWindow())
    svc.build_general_report(window=DateRangeWindow())

    assert attendance.calls == 2


def test_podium_respects_size():
    svc, _ = _service(podium_size=1)

    podium = svc.build_podium(window=DateRangeWindow())

    assert {cid: [r.student_id for r in rows] for cid, rows in podium.items()} == {"c1": ["s1"], "c2": ["s3"]}
