from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a Sunday-school student.

    Note: plain data object; the registry store owns it, the reports only read it.
    """

    student_id: str
    name: str
    birth_date: str
    class_id: str
    active: bool = True
    phone: Optional[str] = None


@dataclass(frozen=True)
class ClassRoom:
    class_id: str
    name: str
    age_range: str = ""
    main_teacher_id: Optional[str] = None
    room: Optional[str] = None


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    name: str
    class_ids: tuple[str, ...] = ()
    phone: str = ""
    email: Optional[str] = None
