from __future__ import annotations

import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_DISPLAY_TIMEZONE, DEFAULT_HTTP_PORT
from .database.bootstrap import ensure_indexes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    mongo_config = getattr(settings, "MONGO_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HTTP_PORT"] = int(getattr(settings, "HTTP_PORT", DEFAULT_HTTP_PORT))
    display_timezone = str(getattr(settings, "DISPLAY_TIMEZONE", DEFAULT_DISPLAY_TIMEZONE))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "Starting attendance service settings=%s store=%s.%s display_tz=%s",
        settings_module,
        mongo_config.get("database"),
        mongo_config.get("collection"),
        display_timezone,
    )

    if container is None:
        container = build_container(mongo_config=mongo_config, display_timezone=display_timezone)
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            names = ensure_indexes(container.conn.collection())
            logger.info("Store indexes ready: %s", ", ".join(names))

    register_attendance(app, container)

    return app


def run() -> None:
    app = create_app()
    port = int(os.getenv("HTTP_PORT") or app.config["HTTP_PORT"])
    logger.info("HTTP server running on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"], threaded=True)


if __name__ == "__main__":
    run()
