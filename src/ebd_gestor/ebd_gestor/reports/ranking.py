"""Student ranking: attendance percentage of each active student in a window."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import UNASSIGNED_CLASS_NAME
from ..registry.model import ClassRoom, Student
from .aggregation import percentage_of, records_in_window
from .model import StudentRankRow
from .temporal import DateWindow


def _numbered(rows: Iterable[StudentRankRow]) -> list[StudentRankRow]:
    return [replace(row, position=index) for index, row in enumerate(rows, start=1)]


def rank_students(
    students: Iterable[Student],
    records: Sequence[AttendanceRecord],
    classes: Iterable[ClassRoom],
    window: DateWindow,
) -> list[StudentRankRow]:
    """Percentage desc, then presences desc; remaining ties keep input order."""
    class_names = {c.class_id: c.name for c in classes}
    in_period = records_in_window(records, window)

    rows = []
    for student in students:
        if not student.active:
            continue
        class_records = [r for r in in_period if r.class_id == student.class_id]
        total_classes = len(class_records)
        present_count = sum(1 for r in class_records if r.is_present(student.student_id))
        rows.append(
            StudentRankRow(
                student_id=student.student_id,
                name=student.name,
                class_id=student.class_id,
                class_name=class_names.get(student.class_id, UNASSIGNED_CLASS_NAME),
                present_count=present_count,
                total_classes=total_classes,
                percentage=percentage_of(present_count, total_classes),
            )
        )

    rows.sort(key=lambda r: (r.percentage, r.present_count), reverse=True)
    return _numbered(rows)


def filter_ranking(
    rows: Iterable[StudentRankRow],
    *,
    search: Optional[str] = None,
    class_id: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[StudentRankRow]:
    """Narrow an already ranked list and number it again from 1.

    ``search`` matches the student name or the class name, case-insensitive.
    """
    term = (search or "").strip().lower()
    kept = [
        row
        for row in rows
        if (not term or term in row.name.lower() or term in row.class_name.lower())
        and (not class_id or row.class_id == class_id)
    ]
    if limit is not None:
        kept = kept[: max(limit, 0)]
    return _numbered(kept)


def podium_by_class(
    rows: Iterable[StudentRankRow],
    classes: Iterable[ClassRoom],
    *,
    size: int = 3,
) -> dict[str, list[StudentRankRow]]:
    """Top ``size`` students of each class by presences, then percentage.

    Classes with no row in ``rows`` are left out, so a filtered ranking only
    yields the classes it still touches.
    """
    rows = list(rows)
    podium: dict[str, list[StudentRankRow]] = {}
    for cls in classes:
        members = [r for r in rows if r.class_id == cls.class_id]
        if not members:
            continue
        members.sort(key=lambda r: (r.present_count, r.percentage), reverse=True)
        podium[cls.class_id] = _numbered(members[:size])
    return podium
