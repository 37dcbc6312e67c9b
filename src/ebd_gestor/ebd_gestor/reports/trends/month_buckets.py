from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import quarter_months, quarter_of
from ...core.constants import MONTH_ABBREVIATIONS
from ...core.enums import Granularity
from ...registry.model import ClassRoom
from ..aggregation import records_in_window, unique_presence_count
from ..model import TrendPoint
from ..temporal import PeriodWindow
from .base import TrendStrategy


def _month_points(records: Sequence[AttendanceRecord], year: int, months: Iterable[int]) -> Iterator[TrendPoint]:
    for month in months:
        window = PeriodWindow(Granularity.MONTH, date(year, month, 1))
        yield TrendPoint(
            label=MONTH_ABBREVIATIONS[month - 1],
            value=unique_presence_count(records_in_window(records, window)),
        )


class YearlyTrendStrategy(TrendStrategy):
    """Twelve buckets, January to December of the reference year."""

    def buckets(self, *, records: Sequence[AttendanceRecord], classes: Sequence[ClassRoom], reference: date) -> Iterator[TrendPoint]:
        return _month_points(records, reference.year, range(1, 13))


class QuarterlyTrendStrategy(TrendStrategy):
    """The three months of the reference quarter."""

    def buckets(self, *, records: Sequence[AttendanceRecord], classes: Sequence[ClassRoom], reference: date) -> Iterator[TrendPoint]:
        return _month_points(records, reference.year, quarter_months(quarter_of(reference.month)))
