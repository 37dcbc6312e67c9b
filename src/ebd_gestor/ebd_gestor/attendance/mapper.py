from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Callable, Mapping, TypeVar

from ..common.validators import coerce_count, coerce_money, require_non_empty
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _or_default(coerce: Callable[[Any, str], T], value: Any, field_name: str, default: T, record_id: str) -> T:
    # A bad tally must not drop the session and its presences.
    try:
        return coerce(value, field_name)
    except ValidationError as e:
        logger.warning("Attendance %s: %s (%r), using %s", record_id, e, value, default)
        return default


def attendance_from_dict(data: Mapping[str, Any]) -> AttendanceRecord:
    """Build a typed record from the loosely-typed stored object.

    Present ids are de-duplicated keeping their order; justifications are kept
    only for students that are actually absent. Only a missing date or class
    rejects the row; unreadable counts and offering fall back to zero.
    """
    session_date = require_non_empty(data.get("date"), "Data da aula")
    class_id = require_non_empty(data.get("classId"), "Classe")
    record_id = f"{session_date}-{class_id}"

    present = tuple(dict.fromkeys(str(sid) for sid in data.get("presentStudentIds") or ()))
    justifications = {
        str(sid): str(text).strip()
        for sid, text in (data.get("justifications") or {}).items()
        if str(sid) not in present and str(text or "").strip()
    }
    registered_by = data.get("registeredByTeacherId")

    return AttendanceRecord(
        session_date=session_date,
        class_id=class_id,
        present_student_ids=present,
        visitors_count=_or_default(coerce_count, data.get("visitorsCount"), "Visitantes", 0, record_id),
        bibles_count=_or_default(coerce_count, data.get("biblesCount"), "Bíblias", 0, record_id),
        magazines_count=_or_default(coerce_count, data.get("magazinesCount"), "Revistas", 0, record_id),
        offering_value=_or_default(coerce_money, data.get("offeringValue"), "Oferta", Decimal("0"), record_id),
        justifications=justifications,
        registered_by_teacher_id=str(registered_by) if registered_by else None,
        notes=str(data.get("notes") or ""),
    )


def attendance_to_dict(record: AttendanceRecord) -> dict:
    out = {
        "id": record.record_id,
        "date": record.session_date,
        "classId": record.class_id,
        "presentStudentIds": list(record.present_student_ids),
        "justifications": dict(record.justifications),
        "visitorsCount": record.visitors_count,
        "biblesCount": record.bibles_count,
        "magazinesCount": record.magazines_count,
        "offeringValue": float(record.offering_value),
        "notes": record.notes,
    }
    if record.registered_by_teacher_id:
        out["registeredByTeacherId"] = record.registered_by_teacher_id
    return out
