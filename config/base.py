"""
Base configuration class for the newsletter subscription service.
"""

import logging
import os
from typing import Any, Dict, List

from .config_constants import (
    ENVIRONMENT_DEVELOPMENT,
    SECURE_ENVIRONMENTS,
    REQUIRED_PROD_ENV_VARS,
    DEFAULT_DATABASE_URL,
    TOKEN_MAX_LENGTH,
    NAME_MAX_LENGTH,
    REQUEST_ID_MAX_LENGTH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SENTRY_TRACES_SAMPLE_RATE,
    ENV_VAR_OVERRIDES
)

# Set up module logger
logger = logging.getLogger(__name__)


class Config:
    """
    Configuration management class for the application.

    Environment subclasses override class attributes; ``init_app`` copies them
    into ``app.config``, layers environment variables on top and validates the
    result before the application starts serving requests.

    Class Attributes:
        REQUIRED_VARS (List[str]): Environment variables that must be set in
            secure environments
    """

    REQUIRED_VARS: List[str] = REQUIRED_PROD_ENV_VARS

    ENV = ENVIRONMENT_DEVELOPMENT
    DEBUG = False
    TESTING = False
    VERSION = '0.1.0'

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')

    # Database configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', DEFAULT_DATABASE_URL)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Input validation limits
    TOKEN_MAX_LENGTH = TOKEN_MAX_LENGTH
    NAME_MAX_LENGTH = NAME_MAX_LENGTH
    REQUEST_ID_MAX_LENGTH = REQUEST_ID_MAX_LENGTH

    # Logging and error reporting
    LOG_LEVEL = DEFAULT_LOG_LEVEL
    LOG_DIR = None
    SENTRY_DSN = None
    SENTRY_TRACES_SAMPLE_RATE = DEFAULT_SENTRY_TRACES_SAMPLE_RATE

    @classmethod
    def init_app(cls, app) -> None:
        """
        Initialize the application with configuration settings.

        Args:
            app: Flask application instance

        Raises:
            RuntimeError: If required environment variables are missing in a
                secure environment
        """
        app.config.from_object(cls)

        # Load settings from environment variables (highest priority)
        cls._load_from_environment(app)

        # Validate configuration
        cls._validate_configuration(app)

    @classmethod
    def _load_from_environment(cls, app) -> None:
        """Copy recognised environment variables into the app config."""
        for key in ENV_VAR_OVERRIDES:
            value = os.environ.get(key)
            if value:
                app.config[key] = value

    @classmethod
    def _validate_configuration(cls, app) -> None:
        """Refuse to start a secure environment with missing settings."""
        if app.config.get('ENV') not in SECURE_ENVIRONMENTS:
            return

        missing = [var for var in cls.REQUIRED_VARS if not os.environ.get(var)]
        if missing:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Return the upper-case settings of this configuration class."""
        return {key: getattr(cls, key) for key in dir(cls) if key.isupper()}
