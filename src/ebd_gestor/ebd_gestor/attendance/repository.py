from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
