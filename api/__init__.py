"""
API package for the newsletter subscription service.

This package provides the HTTP endpoints of the application. Each module in
this package represents a distinct resource type and exposes its routes as a
blueprint registered by ``register_api_routes``.

Key API areas:
- Newsletter: Subscription creation and confirmation
"""

import logging

from flask import Flask

from .newsletter import newsletter_api

logger = logging.getLogger(__name__)


def register_api_routes(app: Flask) -> None:
    """
    Register all API blueprints with the application.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(newsletter_api)
    logger.debug("API routes registered")
