"""
Middleware module for request and response processing.

This module provides middleware functions for processing HTTP requests and responses
in the Flask application. It handles the cross-cutting concerns shared by every
endpoint:

- Request id assignment and propagation for log correlation
- Request timing and access logging

The middleware functions are registered with the Flask application during initialization
and execute for every request/response cycle, ensuring consistent handling across
all endpoints without duplicating code in individual route handlers.
"""

import hashlib
import logging
import os
import socket
import time
import uuid

from flask import Flask, g, request, current_app
from werkzeug.wrappers import Response

from core.utils.string import is_valid_input_string

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'X-Request-ID'


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracking.

    The identifier combines a millisecond timestamp for chronological sorting,
    a UUID fragment for uniqueness, a host identifier and the process id to
    tell application instances apart.

    Returns:
        str: Unique request ID in format: 'req-{timestamp}-{uuid}-{host}-{pid}'
    """
    timestamp = int(time.time() * 1000)  # Millisecond precision
    unique_id = uuid.uuid4().hex[:12]    # Use first 12 chars of UUID for brevity
    process_id = os.getpid() % 10000     # Include process ID (truncated)

    # Get a host identifier (first 4 chars of hostname hash)
    try:
        hostname = socket.gethostname()
        host_id = hashlib.md5(hostname.encode()).hexdigest()[:4]
    except OSError:
        host_id = "0000"

    # Example: req-1635789042513-a7de31f8b4c2-1a2b-3478
    return f"req-{timestamp}-{unique_id}-{host_id}-{process_id}"


def assign_request_id() -> None:
    """
    Store the request id for this request in ``g.request_id``.

    A caller-supplied ``X-Request-ID`` header is reused when it passes input
    validation, so ids can be correlated across services; anything else is
    replaced by a freshly generated id.
    """
    incoming = request.headers.get(REQUEST_ID_HEADER)
    max_length = current_app.config.get('REQUEST_ID_MAX_LENGTH', 64)

    if incoming and is_valid_input_string(incoming, max_length):
        g.request_id = incoming.strip()
    else:
        g.request_id = generate_request_id()


def track_request_timing() -> None:
    """Record the start time of the request in ``g.start_time``."""
    g.start_time = time.time()


def log_request(response: Response) -> Response:
    """Emit one debug-level access log entry for the finished request."""
    start_time = getattr(g, 'start_time', None)
    duration_ms = round((time.time() - start_time) * 1000, 2) if start_time else None

    logger.debug("%s %s -> %s", request.method, request.path, response.status_code, extra={
        'status_code': response.status_code,
        'duration_ms': duration_ms
    })
    return response


def init_middleware(app: Flask) -> None:
    """
    Initialize and register all middleware with the Flask application.

    Args:
        app: Flask application instance
    """
    @app.before_request
    def before_request_middleware():
        assign_request_id()
        track_request_timing()

    @app.after_request
    def after_request_middleware(response):
        response.headers[REQUEST_ID_HEADER] = getattr(g, 'request_id', '')
        return log_request(response)
