"""
Static host routes.

Routes:
    GET  /health        - Liveness probe used by the suite before testing
    GET  /              - The app's index.html
    GET  /<path>        - Any other file from the build directory
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, send_from_directory

logger = logging.getLogger(__name__)

host_bp = Blueprint("host", __name__)


@host_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Return a JSON ``{"status": "healthy", ...}`` body with HTTP 200."""
    return jsonify({"status": "healthy", "service": "todomvc-host"}), 200


@host_bp.route("/", methods=["GET"])
def index() -> Response:
    """Serve the app entry point."""
    return send_from_directory(current_app.config["APP_DIR"], "index.html")


@host_bp.route("/<path:filename>", methods=["GET"])
def asset(filename: str) -> Response:
    """
    Serve a file from the build directory.

    ``send_from_directory`` rejects paths that escape the build directory
    and answers 404 for files that do not exist.
    """
    logger.debug("GET /%s", filename)
    return send_from_directory(current_app.config["APP_DIR"], filename)
