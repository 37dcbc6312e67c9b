from __future__ import annotations

from datetime import date

from src.ebd_gestor.ebd_gestor.attendance.model import AttendanceRecord
from src.ebd_gestor.ebd_gestor.core.enums import Granularity
from src.ebd_gestor.ebd_gestor.registry.model import ClassRoom, Student
from src.ebd_gestor.ebd_gestor.reports.ranking import filter_ranking, podium_by_class, rank_students
from src.ebd_gestor.ebd_gestor.reports.temporal import DateRangeWindow, PeriodWindow

CLASSES = [ClassRoom(class_id="c1", name="Jovens"), ClassRoom(class_id="c2", name="Adultos")]


def _student(sid: str, name: str, class_id: str, active: bool = True) -> Student:
    return Student(student_id=sid, name=name, birth_date="", class_id=class_id, active=active)


def _record(day: str, class_id: str, present) -> AttendanceRecord:
    return AttendanceRecord(session_date=day, class_id=class_id, present_student_ids=tuple(present))


def test_rank_by_percentage_then_presences():
    students = [
        _student("a", "Ana", "c1"),
        _student("b", "Bruno", "c2"),
        _student("c", "Carla", "c1"),
    ]
    records = [
        _record("2024-05-05", "c1", ["a", "c"]),
        _record("2024-05-12", "c1", ["c"]),
        _record("2024-05-05", "c2", ["b"]),
    ]

    rows = rank_students(students, records, CLASSES, DateRangeWindow())

    # Carla 100% (2/2), Bruno 100% (1/1): equal percentage, more presences first.
    assert [(r.student_id, r.present_count, r.total_classes) for r in rows] == [("c", 2, 2), ("b", 1, 1), ("a", 1, 2)]
    assert [r.position for r in rows] == [1, 2, 3]
    assert rows[2].percentage == 50.0


def test_inactive_students_and_missing_classes():
    students = [_student("a", "Ana", "c1", active=False), _student("z", "Zeca", "deleted")]

    rows = rank_students(students, [_record("2024-05-05", "c1", ["a"])], CLASSES, DateRangeWindow())

    assert [r.student_id for r in rows] == ["z"]
    assert rows[0].class_name == "Sem Classe"
    assert rows[0].percentage == 0.0


def test_window_limits_sessions():
    students = [_student("a", "Ana", "c1")]
    records = [_record("2024-05-05", "c1", ["a"]), _record("2024-06-02", "c1", [])]

    rows = rank_students(students, records, CLASSES, PeriodWindow(Granularity.MONTH, date(2024, 5, 1)))

    assert rows[0].total_classes == 1
    assert rows[0].percentage == 100.0


def test_filter_renumbers_positions():
    students = [_student("a", "Ana", "c1"), _student("b", "Bruno", "c2"), _student("c", "Mariana", "c1")]
    records = [_record("2024-05-05", "c1", ["a", "c"]), _record("2024-05-05", "c2", [])]
    ranked = rank_students(students, records, CLASSES, DateRangeWindow())

    by_name = filter_ranking(ranked, search="ANA")
    assert [(r.name, r.position) for r in by_name] == [("Ana", 1), ("Mariana", 2)]

    by_class = filter_ranking(ranked, class_id="c2")
    assert [(r.name, r.position) for r in by_class] == [("Bruno", 1)]

    by_class_name = filter_ranking(ranked, search="adult")
    assert [r.name for r in by_class_name] == ["Bruno"]

    assert len(filter_ranking(ranked, limit=2)) == 2


def test_podium_per_class_orders_by_presences():
    students = [_student(s, s.upper(), "c1") for s in ("a", "b", "c", "d")]
    records = [
        _record("2024-05-05", "c1", ["a", "b", "c"]),
        _record("2024-05-12", "c1", ["b", "c"]),
        _record("2024-05-19", "c1", ["c"]),
    ]
    ranked = rank_students(students, records, CLASSES, DateRangeWindow())

    podium = podium_by_class(ranked, CLASSES, size=3)

    assert list(podium) == ["c1"]
    assert [(r.student_id, r.position) for r in podium["c1"]] == [("c", 1), ("b", 2), ("a", 3)]
