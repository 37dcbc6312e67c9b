from datetime import date

from src.ebd_gestor.ebd_gestor.common.datetime_utils import (
    add_months,
    parse_calendar_date,
    quarter_of,
    shift_reference,
)
from src.ebd_gestor.ebd_gestor.core.enums import Granularity


def test_parse_calendar_date_ignores_time_part():
    assert parse_calendar_date("2024-03-31T23:30:00-03:00") == date(2024, 3, 31)


def test_parse_calendar_date_rejects_garbage():
    assert parse_calendar_date("31/03/2024") is None
    assert parse_calendar_date("2024-02-30") is None
    assert parse_calendar_date("") is None
    assert parse_calendar_date(None) is None


def test_quarter_of_groups_months_by_three():
    assert [quarter_of(m) for m in range(1, 13)] == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 1, 15), -1) == date(2023, 12, 15)


def test_shift_reference_per_granularity():
    ref = date(2024, 2, 29)

    assert shift_reference(ref, Granularity.DAY) == date(2024, 3, 1)
    assert shift_reference(ref, Granularity.MONTH, -1) == date(2024, 1, 29)
    assert shift_reference(ref, Granularity.QUARTER) == date(2024, 5, 29)
    assert shift_reference(ref, Granularity.YEAR) == date(2025, 2, 28)
