from __future__ import annotations

from datetime import date
from typing import Iterator, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import days_in_month
from ...core.enums import Granularity
from ...registry.model import ClassRoom
from ..aggregation import records_in_window, unique_presence_count
from ..model import TrendPoint
from ..temporal import PeriodWindow
from .base import TrendStrategy


class MonthlyTrendStrategy(TrendStrategy):
    """One bucket per day of the month that has at least one session.

    Days without records are left out, not zero-filled.
    """

    def buckets(self, *, records: Sequence[AttendanceRecord], classes: Sequence[ClassRoom], reference: date) -> Iterator[TrendPoint]:
        month_records = records_in_window(records, PeriodWindow(Granularity.MONTH, reference))
        for day in range(1, days_in_month(reference.year, reference.month) + 1):
            window = PeriodWindow(Granularity.DAY, reference.replace(day=day))
            day_records = records_in_window(month_records, window)
            if day_records:
                yield TrendPoint(label=f"{day:02d}", value=unique_presence_count(day_records))


class DailyTrendStrategy(TrendStrategy):
    """Per-class comparison of presences and visitors on the reference day."""

    def buckets(self, *, records: Sequence[AttendanceRecord], classes: Sequence[ClassRoom], reference: date) -> Iterator[TrendPoint]:
        day_records = records_in_window(records, PeriodWindow(Granularity.DAY, reference))
        for cls in classes:
            class_records = [r for r in day_records if r.class_id == cls.class_id]
            yield TrendPoint(
                label=cls.name.split(" ")[0],
                value=unique_presence_count(class_records),
                # First record wins when a class was stored twice for the day.
                visitors=class_records[0].visitors_count if class_records else 0,
            )
