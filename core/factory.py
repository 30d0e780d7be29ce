"""
Newsletter subscription service application factory.

This module provides the application factory function for creating Flask application
instances with the appropriate configuration and extension setup.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from extensions import init_extensions
from core.loggings import setup_app_logging
from core.middleware import init_middleware
from core.health import register_health_endpoints
from api import register_api_routes
from config import get_config
from cli import register_cli_commands

logger = logging.getLogger(__name__)


def create_app(config_name: Optional[str] = None) -> Flask:
    """
    Create and configure a Flask application instance.

    This factory function creates a new Flask application instance with the appropriate
    configuration based on the environment. It sets up logging, extensions, routes,
    error handlers, middleware and CLI commands.

    Args:
        config_name (str, optional): Name of the configuration to use ('development',
                                     'production', 'testing'). Defaults to None.

    Returns:
        Flask: Configured Flask application instance ready to serve requests

    Raises:
        RuntimeError: If a production configuration is missing required settings
    """
    app = Flask(__name__)

    # Load configuration
    config_obj = get_config(config_name)
    config_obj.init_app(app)

    # Set up logging early to capture initialization issues
    setup_app_logging(app)

    # Initialize extensions
    init_extensions(app)

    # Register routes
    register_health_endpoints(app)
    register_api_routes(app)

    # Register error handlers
    register_error_handlers(app)

    # Initialize middleware
    init_middleware(app)

    # Register CLI commands
    register_cli_commands(app)

    app.config['APP_INITIALIZATION_TIME'] = datetime.now(timezone.utc).isoformat()
    logger.info("Application created", extra={
        'environment': app.config.get('ENV'),
        'version': app.config.get('VERSION')
    })

    return app


def register_error_handlers(app: Flask) -> None:
    """
    Register error handlers for different types of exceptions.

    Every error response has an empty body; internal details are only logged.

    Args:
        app (Flask): The Flask application instance
    """
    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException) -> Tuple[str, int]:
        """Handle all HTTP exceptions."""
        if e.code and e.code >= 500:
            logger.error(f"HTTP {e.code}: {e.description}", extra={
                'http_status': e.code,
                'path': request.path
            })
        return '', e.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception) -> Tuple[str, int]:
        """Handle uncaught exceptions."""
        logger.error("Unhandled exception", exc_info=e, extra={
            'http_status': 500,
            'path': request.path,
            'method': request.method
        })
        return '', 500
