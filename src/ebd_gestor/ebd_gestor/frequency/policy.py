"""Low-frequency policy: consecutive recent absences flag a student for deactivation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import LOW_FREQUENCY_THRESHOLD
from ..registry.model import Student


@dataclass(frozen=True)
class DeactivationIntent:
    """Mutation request handed to the registry store."""

    student_id: str
    new_active_state: bool = False


def _most_recent_first(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    # Unparseable dates sort as the oldest sessions.
    return sorted(records, key=lambda r: r.calendar_date or date.min, reverse=True)


def consecutive_absences(student_id: str, class_records: Iterable[AttendanceRecord]) -> int:
    """Absences counted from the most recent session back to the last presence."""
    count = 0
    for record in _most_recent_first(class_records):
        if record.is_present(student_id):
            break
        count += 1
    return count


class LowFrequencyPolicy:
    def __init__(self, threshold: int = LOW_FREQUENCY_THRESHOLD):
        self.threshold = int(threshold)

    def evaluate(self, students: Iterable[Student], records: Sequence[AttendanceRecord]) -> set[str]:
        """Ids of active students whose latest ``threshold`` sessions were all absences.

        Pure decision: nothing is written here.
        """
        by_class: dict[str, list[AttendanceRecord]] = {}
        for record in records:
            by_class.setdefault(record.class_id, []).append(record)

        flagged = set()
        for student in students:
            if not student.active:
                continue
            class_records = by_class.get(student.class_id, [])
            if consecutive_absences(student.student_id, class_records) >= self.threshold:
                flagged.add(student.student_id)
        return flagged

    def intents(self, students: Iterable[Student], records: Sequence[AttendanceRecord]) -> list[DeactivationIntent]:
        return [DeactivationIntent(student_id=sid) for sid in sorted(self.evaluate(students, records))]
