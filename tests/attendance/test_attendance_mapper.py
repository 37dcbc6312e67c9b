from __future__ import annotations

from decimal import Decimal

import pytest

from src.ebd_gestor.ebd_gestor.attendance.mapper import attendance_from_dict, attendance_to_dict
from src.ebd_gestor.ebd_gestor.core.exceptions import ValidationError


def _row(**overrides):
    row = {
        "id": "2024-05-12-c1",
        "date": "2024-05-12",
        "classId": "c1",
        "presentStudentIds": ["s1", "s2", "s1"],
        "justifications": {"s2": "doente", "s3": "viagem", "s4": "  "},
        "visitorsCount": 2,
        "biblesCount": "",
        "magazinesCount": "3",
        "offeringValue": 15.5,
    }
    row.update(overrides)
    return row


def test_present_ids_are_deduplicated_in_order():
    record = attendance_from_dict(_row())

    assert record.present_student_ids == ("s1", "s2")
    assert record.record_id == "2024-05-12-c1"


def test_justifications_only_for_absent_students():
    record = attendance_from_dict(_row())

    assert dict(record.justifications) == {"s3": "viagem"}


def test_counts_and_money_are_coerced():
    record = attendance_from_dict(_row())

    assert record.bibles_count == 0
    assert record.magazines_count == 3
    assert record.offering_value == Decimal("15.5")


@pytest.mark.parametrize("overrides", [{"classId": ""}, {"date": None}])
def test_rows_without_class_or_date_raise(overrides):
    with pytest.raises(ValidationError):
        attendance_from_dict(_row(**overrides))


def test_malformed_date_is_kept_but_has_no_calendar_date():
    record = attendance_from_dict(_row(date="12/05/2024"))

    assert record.session_date == "12/05/2024"
    assert record.calendar_date is None


def test_to_dict_uses_stored_keys():
    out = attendance_to_dict(attendance_from_dict(_row(registeredByTeacherId="t1")))

    assert out["presentStudentIds"] == ["s1", "s2"]
    assert out["registeredByTeacherId"] == "t1"
    assert out["offeringValue"] == 15.5


def test_brazilian_money_and_whole_number_text_are_read():
    record = attendance_from_dict(_row(offeringValue="1.234,50", visitorsCount="2.0"))

    assert record.offering_value == Decimal("1234.50")
    assert record.visitors_count == 2


@pytest.mark.parametrize(
    "overrides",
    [
        {"offeringValue": -1},
        {"offeringValue": "abc"},
        {"visitorsCount": -2},
        {"biblesCount": "dois"},
        {"magazinesCount": "1.5"},
    ],
)
def test_bad_tallies_fall_back_to_zero_and_keep_the_session(overrides):
    record = attendance_from_dict(_row(**overrides))

    assert record.present_student_ids == ("s1", "s2")
    field = {
        "offeringValue": "offering_value",
        "visitorsCount": "visitors_count",
        "biblesCount": "bibles_count",
        "magazinesCount": "magazines_count",
    }[next(iter(overrides))]
    assert getattr(record, field) == 0
