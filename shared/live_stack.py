"""Target-app resolution helpers shared by the smoke and E2E suites."""

from __future__ import annotations

import logging
import socket
import threading
import time
from collections.abc import Generator

import pytest
import requests

from config import Config

logger = logging.getLogger(__name__)


def is_app_ready(url: str, path: str = "", timeout: int = 2) -> bool:
    """Return True when ``url + path`` responds with 200."""
    try:
        response = requests.get(f"{url}{path}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_ready(
    url: str, path: str = "", timeout: int = 60, interval: int = 1
) -> None:
    """Poll ``url + path`` until it answers 200 or the deadline passes."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url, path):
            return
        time.sleep(interval)
    raise RuntimeError(f"TodoMVC app at {url}{path} not ready after {timeout}s")


def is_port_free(host: str, port: int) -> bool:
    """Return True when nothing is bound to ``host:port``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def start_static_host(app_dir: str, host: str, port: int) -> str:
    """
    Serve a built TodoMVC app from ``app_dir`` on a background thread.

    The server thread is a daemon, so it stops with the test session.

    Returns:
        Base URL of the running host.

    Raises:
        RuntimeError: If ``host:port`` is already taken.
    """
    from todomvc_host import create_app

    if not is_port_free(host, port):
        raise RuntimeError(
            f"Cannot serve {app_dir}: {host}:{port} is already in use; set STATIC_PORT"
        )

    app = create_app(app_dir=app_dir)
    server_thread = threading.Thread(
        target=lambda: app.run(host=host, port=port, use_reloader=False, threaded=True)
    )
    server_thread.daemon = True
    server_thread.start()

    base_url = f"http://{host}:{port}"
    logger.info("Serving %s at %s", app_dir, base_url)
    return base_url


def live_app_url(
    config_class: type[Config], *, suite_name: str
) -> Generator[str, None, None]:
    """
    Yield a reachable base URL for the app under test.

    Priority:
    1. Use explicit ``BASE_URL`` (TEST_BASE_URL) and wait for it.
    2. Serve ``APP_DIR`` (TODOMVC_APP_DIR) locally and wait for /health.
    3. Fall back to ``DEFAULT_APP_URL``; skip the suite if it is unreachable.
    """
    base_url = config_class.BASE_URL.rstrip("/")
    if base_url:
        wait_for_app_ready(base_url, timeout=config_class.READY_TIMEOUT_S)
        yield base_url
        return

    if config_class.APP_DIR:
        base_url = start_static_host(
            config_class.APP_DIR, config_class.STATIC_HOST, config_class.STATIC_PORT
        )
        wait_for_app_ready(base_url, "/health", timeout=config_class.READY_TIMEOUT_S)
        yield base_url
        return

    base_url = config_class.DEFAULT_APP_URL.rstrip("/")
    try:
        wait_for_app_ready(base_url, timeout=config_class.READY_TIMEOUT_S)
    except RuntimeError:
        pytest.skip(
            f"{base_url} is unreachable; set TEST_BASE_URL or TODOMVC_APP_DIR "
            f"to run {suite_name} tests"
        )
    logger.info("Running %s tests against %s", suite_name, base_url)
    yield base_url
