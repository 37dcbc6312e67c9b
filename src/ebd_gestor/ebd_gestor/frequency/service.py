from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..registry.repository import RegistryRepository
from .policy import LowFrequencyPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LowFrequencyResult:
    moved_count: int
    student_ids: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"{self.moved_count} aluno(s) movido(s) para Baixa Frequência."


class LowFrequencyService:
    """Use case: user-triggered batch that deactivates students with low frequency."""

    def __init__(
        self,
        registry: RegistryRepository,
        attendance: AttendanceRepository,
        *,
        policy: Optional[LowFrequencyPolicy] = None,
    ):
        self._registry = registry
        self._attendance = attendance
        self._policy = policy or LowFrequencyPolicy()

    def preview(self) -> list[str]:
        students = self._registry.list_students()
        records = self._attendance.list_all()
        return [intent.student_id for intent in self._policy.intents(students, records)]

    def run(self) -> LowFrequencyResult:
        students = self._registry.list_students()
        records = self._attendance.list_all()

        moved = []
        for intent in self._policy.intents(students, records):
            if self._registry.set_active(intent.student_id, is_active=intent.new_active_state):
                moved.append(intent.student_id)
            else:
                logger.warning("Student %s vanished before deactivation", intent.student_id)

        logger.info(
            "Low-frequency check (threshold=%s) deactivated %d student(s)",
            self._policy.threshold,
            len(moved),
        )
        return LowFrequencyResult(moved_count=len(moved), student_ids=moved)
