"""Aggregation engine: per-class report rows, the global row and dashboard KPIs.

Two presence counts live here and they are not interchangeable:

* raw sum of ``present_student_ids`` lengths, used by the class ranking and
  the report tables/exports;
* unique ``(date, student_id)`` pairs, used by the dashboard KPIs and trend
  charts, so a session stored twice is only counted once.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import HIGH_FREQUENCY_PERCENTAGE, MEDIUM_FREQUENCY_PERCENTAGE, TOTAL_ROW_NAME
from ..core.enums import FrequencyBand
from ..registry.model import ClassRoom, Student
from .model import ClassAttendanceBar, ClassReportRow, DashboardStats
from .temporal import DateWindow


def percentage_of(part: int, whole: int) -> float:
    """part/whole as a percentage in [0, 100]; 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0.0
    return max(0.0, min(100.0, part / whole * 100))


def frequency_band(percentage: float) -> FrequencyBand:
    if percentage >= HIGH_FREQUENCY_PERCENTAGE:
        return FrequencyBand.HIGH
    if percentage >= MEDIUM_FREQUENCY_PERCENTAGE:
        return FrequencyBand.MEDIUM
    return FrequencyBand.LOW


def records_in_window(
    records: Iterable[AttendanceRecord],
    window: DateWindow,
    *,
    class_id: Optional[str] = None,
) -> list[AttendanceRecord]:
    return [
        r
        for r in records
        if (class_id is None or r.class_id == class_id) and window.contains(r.session_date)
    ]


def unique_presence_count(records: Iterable[AttendanceRecord]) -> int:
    pairs = {(r.session_date, sid) for r in records for sid in r.present_student_ids}
    return len(pairs)


def raw_presence_count(records: Iterable[AttendanceRecord]) -> int:
    return sum(len(r.present_student_ids) for r in records)


def enrolled_count(class_id: str, students: Iterable[Student]) -> int:
    # Current enrollment, even for past windows: students moved or deactivated
    # since then are not counted.
    return sum(1 for s in students if s.class_id == class_id and s.active)


def aggregate_class(
    class_id: str,
    records: Iterable[AttendanceRecord],
    students: Iterable[Student],
    window: DateWindow,
    *,
    class_name: str = "",
) -> ClassReportRow:
    class_records = records_in_window(records, window, class_id=class_id)
    enrolled = enrolled_count(class_id, students)
    sessions = len(class_records)

    total_present = raw_presence_count(class_records)
    potential = sessions * enrolled

    return ClassReportRow(
        class_id=class_id,
        class_name=class_name or class_id,
        enrolled_count=enrolled,
        sessions=sessions,
        potential_presence=potential,
        total_present=total_present,
        total_absent=max(0, potential - total_present),
        total_visitors=sum(r.visitors_count for r in class_records),
        total_bibles=sum(r.bibles_count for r in class_records),
        total_magazines=sum(r.magazines_count for r in class_records),
        total_offerings=sum((r.offering_value for r in class_records), Decimal("0")),
        percentage=percentage_of(total_present, potential),
        avg_attendance=total_present / sessions if sessions else 0.0,
    )


def rank_classes(
    classes: Iterable[ClassRoom],
    records: Sequence[AttendanceRecord],
    students: Sequence[Student],
    window: DateWindow,
) -> list[ClassReportRow]:
    """One row per class, best frequency first (ties keep class order)."""
    rows = [aggregate_class(c.class_id, records, students, window, class_name=c.name) for c in classes]
    rows.sort(key=lambda row: row.percentage, reverse=True)
    return rows


def aggregate_total(rows: Iterable[ClassReportRow], *, name: str = TOTAL_ROW_NAME) -> ClassReportRow:
    """Element-wise sum of class rows; the percentage is recomputed, not averaged."""
    rows = list(rows)
    sessions = sum(r.sessions for r in rows)
    potential = sum(r.potential_presence for r in rows)
    total_present = sum(r.total_present for r in rows)

    return ClassReportRow(
        class_id=None,
        class_name=name,
        enrolled_count=sum(r.enrolled_count for r in rows),
        sessions=sessions,
        potential_presence=potential,
        total_present=total_present,
        total_absent=sum(r.total_absent for r in rows),
        total_visitors=sum(r.total_visitors for r in rows),
        total_bibles=sum(r.total_bibles for r in rows),
        total_magazines=sum(r.total_magazines for r in rows),
        total_offerings=sum((r.total_offerings for r in rows), Decimal("0")),
        percentage=percentage_of(total_present, potential),
        avg_attendance=total_present / sessions if sessions else 0.0,
    )


def dashboard_stats(
    students: Iterable[Student],
    records: Iterable[AttendanceRecord],
    window: DateWindow,
) -> DashboardStats:
    in_period = records_in_window(records, window)
    total_present = unique_presence_count(in_period)
    count = len(in_period)

    return DashboardStats(
        active_students_count=sum(1 for s in students if s.active),
        total_offerings=sum((r.offering_value for r in in_period), Decimal("0")),
        total_visits=sum(r.visitors_count for r in in_period),
        total_present=total_present,
        # Half-up rounding of presences per session.
        avg_attendance=math.floor(total_present / count + 0.5) if count else 0,
        records_count=count,
    )


def class_attendance_bars(
    classes: Iterable[ClassRoom],
    records: Sequence[AttendanceRecord],
    window: DateWindow,
) -> list[ClassAttendanceBar]:
    in_period = records_in_window(records, window)
    bars = []
    for cls in classes:
        class_records = [r for r in in_period if r.class_id == cls.class_id]
        total = unique_presence_count(class_records)
        bars.append(
            ClassAttendanceBar(
                class_id=cls.class_id,
                name=cls.name,
                presences=total,
                average=round(total / len(class_records), 1) if class_records else 0.0,
            )
        )
    bars.sort(key=lambda bar: bar.presences, reverse=True)
    return bars
