from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import Granularity
from .base import TrendStrategy
from .day_buckets import DailyTrendStrategy, MonthlyTrendStrategy
from .month_buckets import QuarterlyTrendStrategy, YearlyTrendStrategy


@dataclass
class TrendStrategyFactory:
    """Factory Pattern: choose the bucketing strategy for a granularity."""

    def for_granularity(self, granularity: Granularity) -> TrendStrategy:
        if granularity == Granularity.YEAR:
            return YearlyTrendStrategy()
        if granularity == Granularity.QUARTER:
            return QuarterlyTrendStrategy()
        if granularity == Granularity.MONTH:
            return MonthlyTrendStrategy()
        return DailyTrendStrategy()
