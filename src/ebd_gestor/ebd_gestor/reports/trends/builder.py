from __future__ import annotations

from datetime import date
from typing import Iterator, Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...core.enums import Granularity
from ...registry.model import ClassRoom
from ..model import TrendPoint
from .factory import TrendStrategyFactory


class TrendSeries:
    """Lazy, restartable trend sequence.

    Every iteration recomputes the buckets from the snapshot it was given; no
    state is carried between iterations.
    """

    def __init__(
        self,
        records: Sequence[AttendanceRecord],
        classes: Sequence[ClassRoom],
        granularity: Granularity,
        reference: date,
        *,
        factory: Optional[TrendStrategyFactory] = None,
    ):
        self._records = tuple(records)
        self._classes = tuple(classes)
        self.granularity = granularity
        self.reference = reference
        self._factory = factory or TrendStrategyFactory()

    def __iter__(self) -> Iterator[TrendPoint]:
        strategy = self._factory.for_granularity(self.granularity)
        return iter(strategy.buckets(records=self._records, classes=self._classes, reference=self.reference))

    def is_empty(self) -> bool:
        return all(point.value == 0 for point in self)


def build_trend(
    records: Sequence[AttendanceRecord],
    classes: Sequence[ClassRoom],
    granularity: Granularity,
    reference: date,
) -> TrendSeries:
    return TrendSeries(records, classes, granularity, reference)
