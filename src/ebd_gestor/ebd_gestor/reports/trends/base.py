from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterator, Sequence

from ...attendance.model import AttendanceRecord
from ...registry.model import ClassRoom
from ..model import TrendPoint


class TrendStrategy(ABC):
    """Strategy Pattern: how a granularity splits its window into chart buckets."""

    @abstractmethod
    def buckets(
        self,
        *,
        records: Sequence[AttendanceRecord],
        classes: Sequence[ClassRoom],
        reference: date,
    ) -> Iterator[TrendPoint]:
        raise NotImplementedError
