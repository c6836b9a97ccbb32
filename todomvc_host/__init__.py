"""
TodoMVC Static Host: Application Factory.

This module provides a Flask application factory that serves a prebuilt
TodoMVC application from a directory on disk. The end-to-end suite uses
it when ``TODOMVC_APP_DIR`` points at a build, so the browser tests can
run against a local copy of the app instead of a deployed one.

The host does not know anything about todos: it only serves files and a
health probe. All application behaviour lives in the built app itself.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from config import get_config


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, app_dir: str | None = None) -> Flask:
    """
    Construct and configure the static host Flask application.

    Args:
        config_name: Optional environment key ("development", "testing",
            "ci"). When *None*, the TODOMVC_ENV environment variable is
            consulted, defaulting to "development".
        app_dir: Directory containing the built app (``index.html`` plus
            assets). Defaults to the configured ``APP_DIR``.

    Returns:
        A Flask application with the static host blueprint registered.

    Raises:
        FileNotFoundError: If the build directory or its ``index.html``
            does not exist.
    """
    config_class = get_config(config_name)
    build_dir = Path(app_dir or config_class.APP_DIR).resolve()
    if not (build_dir / "index.html").is_file():
        raise FileNotFoundError(f"No TodoMVC build (index.html) found in {build_dir}")

    # Static files are served by the blueprint, not Flask's default handler
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    app.config["APP_DIR"] = str(build_dir)

    logger.info(
        "Creating static host with config: %s, serving %s",
        config_class.__name__,
        build_dir,
    )

    from todomvc_host.routes import host_bp

    app.register_blueprint(host_bp)
    return app
