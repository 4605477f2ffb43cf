"""
Configuration classes for the task manager frontend.

The frontend is a stateless BFF (backend-for-frontend). It serves
server-rendered HTML and delegates every task operation to the remote task
API over HTTP, so the only settings it needs are where that API lives, how
long to wait for it, and which port to listen on.

Configuration is resolved once, when the application factory runs, and the
values are handed to the components that need them.
"""

from __future__ import annotations

import os


class Config:
    """Base configuration for all frontend environments."""

    PORT: int = int(os.environ.get("PORT", "3000"))

    API_BASE_URL: str = os.environ.get("API_BASE_URL", "http://backend:8080/api")
    API_TIMEOUT: float = float(os.environ.get("API_TIMEOUT", "1"))

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Configuration for local development."""

    DEBUG: bool = True
    TESTING: bool = False
    TEMPLATES_AUTO_RELOAD: bool = True


class TestingConfig(Config):
    """Configuration for automated tests."""

    DEBUG: bool = True
    TESTING: bool = True

    API_BASE_URL: str = os.environ.get("TEST_API_BASE_URL", "http://task-api.test/api")


class ProductionConfig(Config):
    """Configuration for production deployments."""

    DEBUG: bool = False
    TESTING: bool = False
    TEMPLATES_AUTO_RELOAD: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Look up and return the configuration class for the given environment.

    Args:
        env: Environment name. When None, falls back to FLASK_ENV.

    Returns:
        The selected configuration class.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
