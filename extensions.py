"""
Flask extensions initialization module for the newsletter subscription service.

This module initializes the Flask extensions used throughout the application.
It maintains these extensions as module-level variables to avoid circular imports
and to provide a central point for extension instance management.

Extensions are initialized but not bound to the application here - the actual binding
happens during application creation in the application factory. This separation allows
for proper testing setup, flexible configuration, and avoids circular imports.

Extensions included:
- Database ORM via SQLAlchemy
- Database migrations via Flask-Migrate
"""

import logging
import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

# Initialize logger
logger = logging.getLogger(__name__)

# Database - Required for models
db = SQLAlchemy()
"""
SQLAlchemy ORM integration for Flask.

Holds the connection pool shared by every request. Request handlers never use
it directly for subscription data; they wrap ``db.session`` in a
``SubscriptionStore`` and hand that to the service layer.
"""

# Migrations
migrate = Migrate(directory=os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations'))


def init_extensions(app: Flask) -> None:
    """
    Initialize all Flask extensions with the app.

    Args:
        app: Flask application
    """
    db.init_app(app)
    migrate.init_app(app, db)

    logger.debug("Extensions initialized for %s environment", app.config.get('ENV'))
