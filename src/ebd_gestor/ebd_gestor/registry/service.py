from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_calendar_date
from ..core.enums import StudentStatus
from ..core.exceptions import NotFoundError
from .model import ClassRoom, Student
from .repository import RegistryRepository


@dataclass(frozen=True)
class ClassOverview:
    class_id: str
    name: str
    age_range: str
    room: Optional[str]
    teacher_name: Optional[str]
    active_students: int


class RegistryService:
    """Use case: look up the registry (students / classes) for listings."""

    def __init__(self, registry: RegistryRepository):
        self._registry = registry

    def search_students(self, term: Optional[str] = None, *, status: StudentStatus = StudentStatus.ACTIVE) -> list[Student]:
        needle = (term or "").strip().lower()
        want_active = status == StudentStatus.ACTIVE
        return [
            s
            for s in self._registry.list_students()
            if s.active == want_active and needle in s.name.lower()
        ]

    def get_class(self, class_id: str) -> ClassRoom:
        for cls in self._registry.list_classes():
            if cls.class_id == class_id:
                return cls
        raise NotFoundError("Classe não encontrada")

    def class_roster(self, class_id: str) -> list[Student]:
        cls = self.get_class(class_id)
        return [s for s in self._registry.list_students() if s.class_id == cls.class_id and s.active]

    def class_overview(self) -> list[ClassOverview]:
        """Classes with their main teacher and current number of active students."""
        teachers = {t.teacher_id: t.name for t in self._registry.list_teachers()}
        students = self._registry.list_students()

        out = []
        for cls in self._registry.list_classes():
            out.append(
                ClassOverview(
                    class_id=cls.class_id,
                    name=cls.name,
                    age_range=cls.age_range,
                    room=cls.room,
                    teacher_name=teachers.get(cls.main_teacher_id) if cls.main_teacher_id else None,
                    active_students=sum(1 for s in students if s.class_id == cls.class_id and s.active),
                )
            )
        return out

    def birthdays(self, month: int) -> list[Student]:
        """Active students born in ``month`` (1-12), by day of birth.

        Only the calendar month and day of ``birth_date`` are read.
        """
        found = []
        for s in self._registry.list_students():
            born = parse_calendar_date(s.birth_date)
            if s.active and born is not None and born.month == month:
                found.append((born.day, s))
        found.sort(key=lambda pair: pair[0])
        return [s for _, s in found]
