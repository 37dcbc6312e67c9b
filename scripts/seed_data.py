from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.ebd_gestor.ebd_gestor.database.bootstrap import ensure_demo_data
from src.ebd_gestor.ebd_gestor.database.json_store import JsonStore, StoreConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = JsonStore.get_instance(StoreConfig(path=Path(settings.DATA_FILE)))

    if ensure_demo_data(store):
        print(f"OK: Demo data written -> {store.path}")
    else:
        print(f"Skip: {store.path} already exists")


if __name__ == "__main__":
    main()
