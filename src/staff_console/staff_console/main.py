from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.web import register_error_handlers
from .container import build_container
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .storage.bootstrap import ensure_demo_data
from .storage.connection import KeyValueStore, StoreConfig

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting staff console with settings=%s", settings_module)

    container = build_container(
        store_config=StoreConfig(path=getattr(settings, "STORE_PATH", None)),
        store=store,
        admin_username=getattr(settings, "ADMIN_USERNAME"),
        admin_password=getattr(settings, "ADMIN_PASSWORD"),
        default_standard_hours=float(getattr(settings, "DEFAULT_STANDARD_HOURS")),
        overtime_unit_hours=float(getattr(settings, "OVERTIME_UNIT_HOURS")),
        extra_pay_policy=getattr(settings, "EXTRA_PAY_POLICY"),
    )
    if bool(getattr(settings, "AUTO_SEED_DATA", False)):
        ensure_demo_data(container.store)

    app.extensions["staff_console"] = container

    register_error_handlers(app)
    register_auth(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    return app
