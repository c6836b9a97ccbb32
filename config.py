"""
Suite configuration module.

This module defines configuration classes for the environments the
TodoMVC end-to-end suite runs in (development, testing, CI). Values are
loaded from environment variables with sensible defaults, so the same
suite can target a deployed app, a locally served build, or the public
demo without code changes.
"""

import os


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``."""
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


class Config:
    """Base configuration with default settings."""

    # Explicit target; wins over everything else when set
    BASE_URL: str = os.environ.get("TEST_BASE_URL", "")

    # Used when neither TEST_BASE_URL nor TODOMVC_APP_DIR is set
    DEFAULT_APP_URL: str = os.environ.get(
        "TODOMVC_DEFAULT_URL", "https://demo.playwright.dev/todomvc"
    )

    # Directory holding a built TodoMVC app to serve locally
    APP_DIR: str = os.environ.get("TODOMVC_APP_DIR", "")
    STATIC_HOST: str = os.environ.get("STATIC_HOST", "127.0.0.1")
    STATIC_PORT: int = _env_int("STATIC_PORT", 5002)

    SCREENSHOT_DIR: str = os.environ.get("SCREENSHOT_DIR", "test-results/screenshots")

    # Playwright expect() timeouts, in milliseconds
    EXPECT_TIMEOUT_MS: int = _env_int("EXPECT_TIMEOUT_MS", 5000)
    FAILURE_CHECK_TIMEOUT_MS: int = 2000

    # How long to wait for the target to answer before giving up, in seconds
    READY_TIMEOUT_S: int = _env_int("READY_TIMEOUT_S", 30)

    VIEWPORT: dict = {"width": 1280, "height": 720}
    SLOW_MO_MS: int = _env_int("SLOW_MO_MS", 0)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Keep the local host off the development port
    STATIC_PORT: int = _env_int("TEST_STATIC_PORT", 5003)


class CIConfig(Config):
    """CI environment configuration (shared, slower runners)."""

    DEBUG: bool = False
    TESTING: bool = True

    EXPECT_TIMEOUT_MS: int = _env_int("EXPECT_TIMEOUT_MS", 10000)
    READY_TIMEOUT_S: int = _env_int("READY_TIMEOUT_S", 90)


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, ci).
             If None, uses the TODOMVC_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODOMVC_ENV", "development")
    return config.get(env, config["default"])
