from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class ClassReportRow:
    """Read-model: consolidated numbers of one class inside a window."""

    class_id: Optional[str]
    class_name: str
    enrolled_count: int
    sessions: int
    potential_presence: int
    total_present: int
    total_absent: int
    total_visitors: int
    total_bibles: int
    total_magazines: int
    total_offerings: Decimal
    percentage: float
    avg_attendance: float

    @property
    def total_pv(self) -> int:
        """Present + visitors."""
        return self.total_present + self.total_visitors


@dataclass(frozen=True)
class StudentRankRow:
    student_id: str
    name: str
    class_id: str
    class_name: str
    present_count: int
    total_classes: int
    percentage: float
    position: int = 0


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: int
    visitors: Optional[int] = None


@dataclass(frozen=True)
class ClassAttendanceBar:
    class_id: str
    name: str
    presences: int
    average: float


@dataclass(frozen=True)
class DashboardStats:
    active_students_count: int
    total_offerings: Decimal
    total_visits: int
    total_present: int
    avg_attendance: int
    records_count: int
