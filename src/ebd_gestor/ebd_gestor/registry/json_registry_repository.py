from __future__ import annotations

from typing import Sequence

from ..database.json_base import load_rows
from ..database.json_store import JsonStore
from .mapper import class_from_dict, student_from_dict, teacher_from_dict
from .model import ClassRoom, Student, Teacher
from .repository import RegistryRepository


class JsonRegistryRepository(RegistryRepository):
    def __init__(self, store: JsonStore):
        self._store = store

    def list_students(self) -> Sequence[Student]:
        return load_rows(self._store.get("students", []), student_from_dict, "student")

    def list_classes(self) -> Sequence[ClassRoom]:
        return load_rows(self._store.get("classes", []), class_from_dict, "class")

    def list_teachers(self) -> Sequence[Teacher]:
        return load_rows(self._store.get("teachers", []), teacher_from_dict, "teacher")

    def set_active(self, student_id: str, *, is_active: bool) -> bool:
        rows = self._store.get("students") or []
        for row in rows:
            if isinstance(row, dict) and str(row.get("id")) == str(student_id):
                row["active"] = bool(is_active)
                self._store.put("students", rows)
                return True
        return False
