from __future__ import annotations

from ..database.json_store import JsonStore
from .model import ChurchSettings


class JsonSettingsRepository:
    def __init__(self, store: JsonStore):
        self._store = store

    def get_church_settings(self) -> ChurchSettings:
        return ChurchSettings.from_dict(self._store.get("settings", {}))
