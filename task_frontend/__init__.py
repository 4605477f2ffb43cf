"""
Task manager frontend Flask application factory.

Provides the ``create_app`` factory function that assembles the frontend.
The service is a stateless Backend-for-Frontend (BFF): it serves
server-rendered HTML pages via Jinja templates and forwards every task
operation to the remote task API.

The frontend never stores tasks itself. Configuration is read once here and
passed to the task API client, which is shared by all requests through
``app.extensions``.
"""

from __future__ import annotations

import logging

from flask import Flask

from config import get_config

from .errors import register_error_handlers
from .filters import register_filters
from .task_api import TaskApiClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the frontend application.

    Instantiates the Flask app, loads the configuration object for the
    requested environment, builds the task API client from it, and
    registers the template filters, views blueprint and error handlers.

    Args:
        config_name: Optional configuration environment name
            (``"development"``, ``"testing"``, ``"production"``).  When
            *None*, the value is read from the ``FLASK_ENV`` environment
            variable, defaulting to ``"development"``.

    Returns:
        A fully configured :class:`~flask.Flask` application instance.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    logging.getLogger(__name__.split(".")[0]).setLevel(app.config["LOG_LEVEL"])

    logger.info("Creating frontend app with config: %s", config_class.__name__)

    app.extensions["task_api"] = TaskApiClient(
        app.config["API_BASE_URL"],
        timeout=app.config["API_TIMEOUT"],
    )

    register_filters(app)

    # Import inside the factory to avoid circular imports -- the blueprint
    # module references helpers from this package, which must exist first.
    from .routes.views import views_bp

    app.register_blueprint(views_bp)
    register_error_handlers(app)
    return app
