from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_PODIUM_SIZE, DEFAULT_RANKING_LIMIT, LOW_FREQUENCY_THRESHOLD
from .database.bootstrap import ensure_demo_data
from .registry.controller import register as register_registry
from .reports.controller import register as register_reports
from .settings.model import EngineSettings

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None, *, data_file: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    data_file = data_file or getattr(settings, "DATA_FILE")

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s data_file=%s", settings_module, data_file)

    engine_settings = EngineSettings(
        low_frequency_threshold=int(getattr(settings, "LOW_FREQUENCY_THRESHOLD", LOW_FREQUENCY_THRESHOLD)),
        ranking_limit=int(getattr(settings, "RANKING_LIMIT", DEFAULT_RANKING_LIMIT)),
        podium_size=int(getattr(settings, "PODIUM_SIZE", DEFAULT_PODIUM_SIZE)),
    )
    container = build_container(data_file=data_file, engine_settings=engine_settings)

    if bool(getattr(settings, "AUTO_SEED_DATA", False)):
        ensure_demo_data(container.store)

    app.extensions["ebd_container"] = container
    register_registry(app, container)
    register_reports(app, container)

    return app
