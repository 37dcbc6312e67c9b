from __future__ import annotations

import json

from src.ebd_gestor.ebd_gestor.attendance.json_attendance_repository import JsonAttendanceRepository
from src.ebd_gestor.ebd_gestor.attendance.model import AttendanceRecord
from src.ebd_gestor.ebd_gestor.database.json_store import JsonStore, StoreConfig
from src.ebd_gestor.ebd_gestor.frequency.policy import LowFrequencyPolicy, consecutive_absences
from src.ebd_gestor.ebd_gestor.frequency.service import LowFrequencyService
from src.ebd_gestor.ebd_gestor.registry.model import Student


class FakeRegistryRepo:
    def __init__(self, students):
        self._students = {s.student_id: s for s in students}
        self.updates = []

    def list_students(self):
        return list(self._students.values())

    def list_classes(self):
        return []

    def list_teachers(self):
        return []

    def set_active(self, student_id, *, is_active):
        self.updates.append((student_id, is_active))
        return student_id in self._students


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records

    def list_all(self):
        return list(self._records)


def _student(sid: str, class_id: str = "c1", active: bool = True) -> Student:
    return Student(student_id=sid, name=sid.upper(), birth_date="", class_id=class_id, active=active)


def _sessions(pattern: str, student_id: str = "s1", class_id: str = "c1"):
    """One record per Sunday of 2024, oldest first: 'P' present, 'A' absent."""
    return [
        AttendanceRecord(
            session_date=f"2024-03-{day:02d}",
            class_id=class_id,
            present_student_ids=(student_id,) if mark == "P" else (),
        )
        for day, mark in zip(range(1, 29, 3), pattern)
    ]


def test_only_the_latest_streak_counts():
    # The older absences are cut off by the presence in between.
    assert consecutive_absences("s1", _sessions("AAAAPA")) == 1


def test_streak_ignores_storage_order():
    assert consecutive_absences("s1", list(reversed(_sessions("PAAA")))) == 3


def test_four_recent_absences_flag_the_student():
    policy = LowFrequencyPolicy()

    assert policy.evaluate([_student("s1")], _sessions("PAAAA")) == {"s1"}
    assert policy.evaluate([_student("s1")], _sessions("PPAAA")) == set()


def test_inactive_students_and_other_classes_are_skipped():
    records = _sessions("AAAA")
    students = [_student("s1", active=False), _student("s2", class_id="c2")]

    assert LowFrequencyPolicy().evaluate(students, records) == set()


def test_malformed_dates_count_as_oldest_sessions():
    records = _sessions("AAA") + [
        AttendanceRecord(session_date="sometime", class_id="c1", present_student_ids=("s1",))
    ]

    assert consecutive_absences("s1", records) == 3


def test_threshold_can_be_overridden():
    assert LowFrequencyPolicy(threshold=2).evaluate([_student("s1")], _sessions("PAA")) == {"s1"}


def test_service_deactivates_flagged_students():
    registry = FakeRegistryRepo([_student("s1"), _student("s2")])
    records = _sessions("AAAA") + [
        AttendanceRecord(session_date="2024-03-30", class_id="c1", present_student_ids=("s2",))
    ]
    svc = LowFrequencyService(registry, FakeAttendanceRepo(records))

    assert svc.preview() == ["s1"]

    result = svc.run()

    assert registry.updates == [("s1", False)]
    assert result.moved_count == 1
    assert result.message == "1 aluno(s) movido(s) para Baixa Frequência."


def test_service_reports_zero_when_nobody_is_flagged():
    registry = FakeRegistryRepo([_student("s1")])
    result = LowFrequencyService(registry, FakeAttendanceRepo(_sessions("AAAP"))).run()

    assert result.moved_count == 0
    assert registry.updates == []


def test_session_with_unreadable_offering_still_counts_as_presence(tmp_path):
    rows = [
        {"date": f"2024-03-{day:02d}", "classId": "c1", "presentStudentIds": []}
        for day in (3, 10, 17, 24)
    ]
    rows.append({"date": "2024-03-31", "classId": "c1", "presentStudentIds": ["s1"], "offeringValue": "10,5O"})
    path = tmp_path / "ebd.json"
    path.write_text(json.dumps({"ebd_attendance": rows}), encoding="utf-8")

    records = JsonAttendanceRepository(JsonStore(StoreConfig(path=path))).list_all()

    assert len(records) == 5
    assert LowFrequencyPolicy().evaluate([_student("s1")], records) == set()
