"""
Logging configuration module for the newsletter subscription service.

This module provides the logging setup for the application: structured JSON
logs outside development, optional file-based logging with size-based rotation,
request context enrichment, and integration with Sentry for error tracking.

Store failures are logged once by the service layer, with an ``operation`` extra
naming the failing query; the JSON formatter lifts that field to the top level
so log entries can be filtered by failing step.
"""

import logging
import logging.handlers
import json
import os
import socket
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from flask import Flask, request, g, has_request_context
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

# Create a module-level logger
logger = logging.getLogger(__name__)

# Marks handlers installed by setup_app_logging so repeated app creation
# (tests, reloader) replaces them instead of stacking duplicates
HANDLER_MARKER = '_newsletter_handler'

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRIBUTES = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "id", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName"
})


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging with request context.

    Adds the request id, method and path when a record is emitted inside a
    request, and copies any ``extra`` fields onto the top-level object.
    """
    def __init__(self) -> None:
        super().__init__()
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON with additional context."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "host": self.hostname
        }

        # Include exception info if present
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "value": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info)
            }

        # Add Flask request context if available
        if has_request_context():
            log_data["request"] = {
                "id": getattr(g, 'request_id', 'unknown'),
                "method": request.method,
                "path": request.path,
                "remote_addr": request.remote_addr
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_MARKER, True)
    return handler


def setup_app_logging(app: Flask) -> None:
    """
    Configure centralized application logging.

    Sets up console output (readable in development, JSON elsewhere), an
    optional rotating file log when ``LOG_DIR`` is configured, and Sentry when
    ``SENTRY_DSN`` is configured. Modules log through
    ``logging.getLogger(__name__)`` and propagate to the root logger configured
    here.

    Args:
        app (Flask): The Flask application instance to configure logging for

    Returns:
        None: This function configures the application's logging system in-place

    Example:
        app = Flask(__name__)
        setup_app_logging(app)
        app.logger.info("Application logging initialized")
    """
    root_logger = logging.getLogger()

    # Clear our own handlers to avoid duplicates when the app is created again
    for handler in root_logger.handlers[:]:
        if getattr(handler, HANDLER_MARKER, False):
            root_logger.removeHandler(handler)

    is_dev = app.config.get('ENV', 'production').lower() == 'development'
    log_level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    root_logger.setLevel(numeric_level)

    # Create console handler
    console_handler = _mark(logging.StreamHandler(sys.stdout))
    if is_dev:
        # Use a more readable format for development
        console_handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
        ))
    else:
        # Use structured JSON everywhere else for better parsing
        console_handler.setFormatter(JsonFormatter())
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    log_dir = app.config.get('LOG_DIR')
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)

            # Main application log - 10MB files, keep 10 backups
            file_handler = _mark(logging.handlers.RotatingFileHandler(
                os.path.join(log_dir, 'application.log'),
                maxBytes=10 * 1024 * 1024,
                backupCount=10,
                encoding='utf-8'
            ))
            file_handler.setFormatter(JsonFormatter())
            file_handler.setLevel(numeric_level)
            root_logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not initialize file logging: {e}")

    app.logger.setLevel(numeric_level)

    # Configure Sentry for error reporting
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config.get('SENTRY_DSN'),
            integrations=[
                FlaskIntegration(),
                SqlalchemyIntegration()
            ],
            environment=app.config.get('ENV'),
            release=app.config.get('VERSION', 'unknown'),
            send_default_pii=False,
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 0.1)
        )
        logger.info("Sentry error reporting initialized")

    logger.debug("Application logging initialized", extra={
        "log_dir": log_dir,
        "environment": app.config.get('ENV'),
        "level": log_level
    })
