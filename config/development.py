"""
Development environment configuration for the newsletter subscription service.

Enables debugging aids and verbose logging against a local SQLite database.
"""

import os
from .base import Config
from .config_constants import ENVIRONMENT_DEVELOPMENT


class DevelopmentConfig(Config):
    """Configuration for local development."""

    DEBUG = True
    ENV = ENVIRONMENT_DEVELOPMENT

    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL', 'sqlite:///newsletter-dev.db')
    SQLALCHEMY_ECHO = False

    LOG_LEVEL = 'DEBUG'
