from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .database.json_store import JsonStore, StoreConfig
from .frequency.policy import LowFrequencyPolicy
from .frequency.service import LowFrequencyService
from .registry.json_registry_repository import JsonRegistryRepository
from .registry.service import RegistryService
from .reports.service import ReportService
from .settings.json_settings_repository import JsonSettingsRepository
from .settings.model import EngineSettings


@dataclass(frozen=True)
class Container:
    store: JsonStore
    engine_settings: EngineSettings

    registry_repo: JsonRegistryRepository
    attendance_repo: JsonAttendanceRepository
    settings_repo: JsonSettingsRepository

    registry_service: RegistryService
    report_service: ReportService
    low_frequency_service: LowFrequencyService


def build_container(*, data_file: str | Path, engine_settings: EngineSettings | None = None) -> Container:
    engine_settings = engine_settings or EngineSettings()
    store = JsonStore.get_instance(StoreConfig(path=Path(data_file)))

    registry_repo = JsonRegistryRepository(store)
    attendance_repo = JsonAttendanceRepository(store)
    settings_repo = JsonSettingsRepository(store)

    registry_service = RegistryService(registry_repo)
    report_service = ReportService(registry_repo, attendance_repo, settings=engine_settings)
    low_frequency_service = LowFrequencyService(
        registry_repo,
        attendance_repo,
        policy=LowFrequencyPolicy(engine_settings.low_frequency_threshold),
    )

    return Container(
        store=store,
        engine_settings=engine_settings,
        registry_repo=registry_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        registry_service=registry_service,
        report_service=report_service,
        low_frequency_service=low_frequency_service,
    )
