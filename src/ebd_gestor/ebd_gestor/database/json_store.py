from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

# Same keys the browser app uses in localStorage, so a dump of it loads as-is.
STORAGE_KEYS = {
    "students": "ebd_students",
    "teachers": "ebd_teachers",
    "classes": "ebd_classes",
    "attendance": "ebd_attendance",
    "settings": "ebd_settings",
}


@dataclass
class StoreConfig:
    path: Path


class JsonStore:
    """Singleton-like JSON snapshot store.

    Note: the file is read whole on every call, the same way the browser app
    re-reads localStorage, so each report works on a fresh snapshot.
    """

    _instance: Optional["JsonStore"] = None

    def __init__(self, config: StoreConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "JsonStore":
        if cls._instance is None or cls._instance.path != Path(config.path):
            cls._instance = JsonStore(config)
        return cls._instance

    @property
    def path(self) -> Path:
        return Path(self._config.path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> dict[str, Any]:
        if not self.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def get(self, name: str, default: Any = None) -> Any:
        return self.load().get(STORAGE_KEYS[name], default)

    def put(self, name: str, value: Any) -> None:
        data = self.load()
        data[STORAGE_KEYS[name]] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)
