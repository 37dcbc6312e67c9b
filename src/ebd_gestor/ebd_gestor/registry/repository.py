from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassRoom, Student, Teacher


class RegistryRepository(Protocol):
    """Repository interface for registry entities (students, classes, teachers).

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_classes(self) -> Sequence[ClassRoom]:
        raise NotImplementedError

    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def set_active(self, student_id: str, *, is_active: bool) -> bool:
        raise NotImplementedError
