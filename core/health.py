"""
Health check module for the newsletter subscription service.

Provides the liveness endpoint used by load balancers and container
orchestration, and a database connectivity check used by the CLI.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from flask import Blueprint, Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from extensions import db

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health_check', methods=['GET'])
def health_check() -> Tuple[str, int]:
    """
    Basic health check endpoint.

    Returns 200 with an empty body whenever the application is able to serve
    requests. It does not touch the database.
    """
    return '', 200


# Database-specific health check
def check_database_health() -> Dict[str, Any]:
    """
    Check database connection health.

    Returns:
        Dict[str, Any]: Database health information
    """
    result = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    try:
        start_time = time.time()
        db.session.execute(text("SELECT 1")).fetchall()
        query_time = time.time() - start_time

        result.update({
            "latency_ms": round(query_time * 1000, 2),
            "message": "Database is accessible"
        })
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        result.update({
            "status": "critical",
            "message": f"Database connection error: {str(e)}"
        })

    return result


def register_health_endpoints(app: Flask) -> None:
    """Register health check endpoints with the Flask application."""
    app.register_blueprint(health_bp)
