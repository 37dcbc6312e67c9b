from __future__ import annotations

from typing import Sequence

from ..database.json_base import load_rows
from ..database.json_store import JsonStore
from .mapper import attendance_from_dict
from .model import AttendanceRecord
from .repository import AttendanceRepository


class JsonAttendanceRepository(AttendanceRepository):
    def __init__(self, store: JsonStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return load_rows(self._store.get("attendance", []), attendance_from_dict, "attendance")
