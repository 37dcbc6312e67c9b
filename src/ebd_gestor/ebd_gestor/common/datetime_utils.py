from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.enums import Granularity

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """Read the (year, month, day) triple at the start of an ISO string.

    Anything after the day (e.g. ``T00:00:00Z``) is ignored so no timezone
    conversion ever happens. Returns None when the value is not a real date.
    """
    if not isinstance(value, str):
        return None
    match = _ISO_DATE.match(value.strip())
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_br_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def quarter_of(month: int) -> int:
    """Calendar quarter (1-4) of a month number (1-12)."""
    return (month - 1) // 3 + 1


def quarter_months(quarter: int) -> tuple[int, int, int]:
    first = (quarter - 1) * 3 + 1
    return first, first + 1, first + 2


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Step a date by whole months, clamping the day to the target month."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(value.day, days_in_month(year, month)))


def shift_reference(reference: date, granularity: Granularity, steps: int = 1) -> date:
    """Move the reference date by ``steps`` windows (negative goes back)."""
    if granularity == Granularity.DAY:
        return reference + timedelta(days=steps)
    if granularity == Granularity.MONTH:
        return add_months(reference, steps)
    if granularity == Granularity.QUARTER:
        return add_months(reference, 3 * steps)
    return add_months(reference, 12 * steps)
