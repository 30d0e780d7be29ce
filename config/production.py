"""
Production environment configuration for the newsletter subscription service.

This module defines the configuration settings for the production environment,
requiring explicit secrets and a database URL and enabling connection pooling
and error reporting.
"""

import os
from .base import Config
from .config_constants import (
    ENVIRONMENT_PRODUCTION,
    DEFAULT_DB_CONFIG
)


class ProductionConfig(Config):
    """
    Configuration for production environment.

    Disables debugging features and pools database connections.
    """

    DEBUG = False
    TESTING = False
    ENV = ENVIRONMENT_PRODUCTION

    # Production database settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_ENGINE_OPTIONS = dict(DEFAULT_DB_CONFIG)

    # Sentry error reporting
    SENTRY_DSN = os.environ.get('SENTRY_DSN')
    SENTRY_TRACES_SAMPLE_RATE = 0.1

    # Production logging level
    LOG_LEVEL = 'WARNING'
