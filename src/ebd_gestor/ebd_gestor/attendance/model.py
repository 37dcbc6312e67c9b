from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Mapping, Optional

from ..common.datetime_utils import parse_calendar_date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one class meeting on one date (a "session").

    ``session_date`` keeps the raw ISO string as stored; a malformed value is
    kept as-is and simply never matches any reporting window.
    """

    session_date: str
    class_id: str
    present_student_ids: tuple[str, ...] = ()
    visitors_count: int = 0
    bibles_count: int = 0
    magazines_count: int = 0
    offering_value: Decimal = Decimal("0")
    justifications: Mapping[str, str] = field(default_factory=dict)
    registered_by_teacher_id: Optional[str] = None
    notes: str = ""

    @property
    def record_id(self) -> str:
        return f"{self.session_date}-{self.class_id}"

    @property
    def calendar_date(self) -> Optional[date]:
        return parse_calendar_date(self.session_date)

    def is_present(self, student_id: str) -> bool:
        return student_id in self.present_student_ids
