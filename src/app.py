"""Flask app serving the applicant REST resource."""

from __future__ import annotations

import logging
import os
from typing import Any

import psycopg
from flask import Flask

import applicants
import db

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from ``LOG_LEVEL``."""

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
    )


def handle_storage_error(exc: psycopg.Error):
    """Fold every database failure into a plain-text 500."""

    logger.error("Error executing PostgreSQL query: %s", exc, exc_info=exc)
    return "Internal Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}


def create_app(pool=None, test_config: dict[str, Any] | None = None) -> Flask:
    """Build the Flask app around ``pool``, opening a real pool when omitted."""

    app = Flask(__name__)
    app.secret_key = os.getenv("FLASK_SECRET_KEY", "dev")
    if test_config:
        app.config.update(test_config)

    if pool is None:
        pool = db.create_pool()
    app.extensions["db_pool"] = pool

    app.register_blueprint(applicants.create_blueprint(pool))
    app.register_error_handler(psycopg.Error, handle_storage_error)
    return app


def main() -> None:
    """Probe the database, then serve until interrupted."""

    configure_logging()
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    pool = db.create_pool()
    try:
        db.check_connection(pool)
        logger.info("Server is running at http://localhost:%s", port)
        create_app(pool).run(host="0.0.0.0", port=port)
    finally:
        pool.close()


if __name__ == "__main__":
    main()
