from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .demo import seed_demo_students
from .roster.controller import register as register_roster

logger = logging.getLogger(__name__)

SETTING_NAMES = ("SECRET_KEY", "DATA_DIR", "STORAGE_KEY", "DEFAULT_ATTENDANCE", "DEBUG", "LOG_LEVEL", "SEED_DEMO")


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        app.config[name] = getattr(settings, name, None)
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s data_dir=%s key=%s", settings_module, app.config["DATA_DIR"], app.config["STORAGE_KEY"])

    container = build_container(
        data_dir=app.config["DATA_DIR"],
        storage_key=app.config["STORAGE_KEY"] or "students",
        default_attendance=app.config["DEFAULT_ATTENDANCE"] or "Absent",
    )

    if app.config.get("SEED_DEMO") and not container.roster_service.state.students:
        added = seed_demo_students(container.roster_service)
        logger.info("Seeded %d demo students", added)

    app.extensions["roster_container"] = container
    register_roster(app, container)

    return app
