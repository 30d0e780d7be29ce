"""
Testing environment configuration for the newsletter subscription service.

This module defines configuration settings for the testing environment,
optimized for automated testing with deterministic behavior and an isolated
in-memory database.
"""

import os
from .base import Config
from .config_constants import ENVIRONMENT_TESTING


class TestingConfig(Config):
    """
    Configuration for testing environment.

    Uses an in-memory SQLite database and keeps log output to errors only.
    """

    DEBUG = False
    TESTING = True
    ENV = ENVIRONMENT_TESTING

    SECRET_KEY = 'test-secret-key'

    # Test database (in-memory SQLite by default)
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DATABASE_URL', 'sqlite:///:memory:')

    # Skip interference with server responses
    PRESERVE_CONTEXT_ON_EXCEPTION = False
    TRAP_HTTP_EXCEPTIONS = False

    # Testing-specific logging - minimize noise but capture errors
    LOG_LEVEL = 'ERROR'
    SENTRY_DSN = None

    @classmethod
    def _load_from_environment(cls, app) -> None:
        # Tests must not pick up a developer's SENTRY_DSN or LOG_DIR
        pass
