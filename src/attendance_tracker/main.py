from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container, storage_backend
from .core.constants import KV_TABLE
from .core.enums import StorageBackend
from .database.bootstrap import ensure_kv_table, list_tables
from .subjects.controller import register as register_subjects


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if container is None:
        container = build_container(settings=settings)

        backend = storage_backend(settings)
        if app.config["DEBUG"]:
            print("[attendance-tracker] settings=", settings_module, " backend=", backend.value)

        if backend is StorageBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_kv_table(container.conn, table=str(getattr(settings, "KV_TABLE", KV_TABLE)))
            if app.config["DEBUG"]:
                print(f"[attendance-tracker] schema ready (tables={len(list_tables(container.conn))})")

    app.extensions["attendance_tracker"] = container
    register_subjects(app, container)

    return app
