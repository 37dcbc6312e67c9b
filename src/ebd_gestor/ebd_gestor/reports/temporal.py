"""Temporal filter: decides whether a session date falls inside a window.

All comparisons are on calendar (year, month, day) values read from the ISO
string, so there is no time-of-day or timezone involved anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Union

from ..common.datetime_utils import format_br_date, parse_calendar_date, quarter_of
from ..core.constants import MONTH_NAMES
from ..core.enums import Granularity


def in_window(record_date: Union[str, date, None], granularity: Granularity, reference: date) -> bool:
    day = record_date if isinstance(record_date, date) else parse_calendar_date(record_date)
    if day is None:
        return False

    if granularity == Granularity.DAY:
        return day == reference
    if day.year != reference.year:
        return False
    if granularity == Granularity.MONTH:
        return day.month == reference.month
    if granularity == Granularity.QUARTER:
        return quarter_of(day.month) == quarter_of(reference.month)
    return True


class DateWindow(Protocol):
    def contains(self, record_date: Union[str, date, None]) -> bool:
        raise NotImplementedError

    @property
    def label(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class PeriodWindow:
    """Day / month / quarter / year around a reference date."""

    granularity: Granularity
    reference: date

    def contains(self, record_date: Union[str, date, None]) -> bool:
        return in_window(record_date, self.granularity, self.reference)

    @property
    def label(self) -> str:
        ref = self.reference
        if self.granularity == Granularity.DAY:
            return format_br_date(ref)
        if self.granularity == Granularity.MONTH:
            return f"{MONTH_NAMES[ref.month - 1]} {ref.year}"
        if self.granularity == Granularity.QUARTER:
            return f"{quarter_of(ref.month)}º Trimestre {ref.year}"
        return str(ref.year)


@dataclass(frozen=True)
class DateRangeWindow:
    """Inclusive start/end range; either bound may be left open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def contains(self, record_date: Union[str, date, None]) -> bool:
        day = record_date if isinstance(record_date, date) else parse_calendar_date(record_date)
        if day is None:
            return False
        if self.start and day < self.start:
            return False
        if self.end and day > self.end:
            return False
        return True

    @property
    def label(self) -> str:
        if not self.start and not self.end:
            return "Histórico Completo"
        start = format_br_date(self.start) if self.start else "Início"
        end = format_br_date(self.end) if self.end else "Hoje"
        return f"Período: {start} até {end}"
