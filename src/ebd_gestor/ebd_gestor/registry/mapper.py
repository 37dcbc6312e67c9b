"""Boundary constructors for registry entities.

The browser store keeps loosely-typed camelCase objects; these helpers turn
them into the typed records.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.datetime_utils import parse_calendar_date
from ..common.validators import coerce_flag, require_non_empty
from ..core.exceptions import ValidationError
from .model import ClassRoom, Student, Teacher

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def student_from_dict(data: Mapping[str, Any]) -> Student:
    """Only a missing id or name rejects the row; a bad birth date or flag is logged."""
    student_id = require_non_empty(data.get("id"), "ID do aluno")
    name = require_non_empty(data.get("name"), "Nome do aluno")

    birth_date = str(data.get("birthDate") or "").strip()
    if birth_date and parse_calendar_date(birth_date) is None:
        logger.warning("Student %s: birth date %r is not YYYY-MM-DD, ignoring it", student_id, birth_date)
        birth_date = ""

    try:
        active = coerce_flag(data.get("active"), "Ativo", default=True)
    except ValidationError:
        logger.warning("Student %s: active flag %r not understood, keeping active", student_id, data.get("active"))
        active = True

    return Student(
        student_id=student_id,
        name=name,
        birth_date=birth_date,
        class_id=str(data.get("classId") or "").strip(),
        active=active,
        phone=_optional_str(data.get("phone")),
    )


def class_from_dict(data: Mapping[str, Any]) -> ClassRoom:
    return ClassRoom(
        class_id=require_non_empty(data.get("id"), "ID da classe"),
        name=require_non_empty(data.get("name"), "Nome da classe"),
        age_range=str(data.get("ageRange") or ""),
        main_teacher_id=_optional_str(data.get("mainTeacherId")),
        room=_optional_str(data.get("room")),
    )


def teacher_from_dict(data: Mapping[str, Any]) -> Teacher:
    return Teacher(
        teacher_id=require_non_empty(data.get("id"), "ID do professor"),
        name=require_non_empty(data.get("name"), "Nome do professor"),
        class_ids=tuple(str(c) for c in data.get("classIds") or ()),
        phone=str(data.get("phone") or ""),
        email=_optional_str(data.get("email")),
    )
