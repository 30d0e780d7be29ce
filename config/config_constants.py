"""
Configuration constants for the newsletter subscription service.

This module centralizes configuration constants used throughout the application,
providing a single source of truth for environment names, default values and
the limits applied to user-supplied input. These constants are used by the
configuration classes in config/base.py and its environment subclasses.
"""

from typing import Dict, Any, List, FrozenSet

#=====================================================================
# Environment Constants
#=====================================================================

# Environment names
ENVIRONMENT_DEVELOPMENT = 'development'
ENVIRONMENT_TESTING = 'testing'
ENVIRONMENT_PRODUCTION = 'production'

# Set of allowed environments
ALLOWED_ENVIRONMENTS: FrozenSet[str] = frozenset([
    ENVIRONMENT_DEVELOPMENT,
    ENVIRONMENT_TESTING,
    ENVIRONMENT_PRODUCTION
])

# Set of environments requiring secure settings
SECURE_ENVIRONMENTS: FrozenSet[str] = frozenset([
    ENVIRONMENT_PRODUCTION
])

#=====================================================================
# Required Variables
#=====================================================================

# Must be present in the process environment for secure environments
REQUIRED_PROD_ENV_VARS: List[str] = [
    'SECRET_KEY',
    'DATABASE_URL'
]

#=====================================================================
# Default Values
#=====================================================================

DEFAULT_DATABASE_URL = 'sqlite:///newsletter.db'

DEFAULT_DB_CONFIG: Dict[str, Any] = {
    'pool_recycle': 280,
    'pool_pre_ping': True,
    'pool_size': 10,
    'max_overflow': 20
}

# Input limits, counted in grapheme clusters
TOKEN_MAX_LENGTH = 25
NAME_MAX_LENGTH = 256
REQUEST_ID_MAX_LENGTH = 64

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_SENTRY_TRACES_SAMPLE_RATE = 0.2

# Environment variables copied into app.config when set
ENV_VAR_OVERRIDES: List[str] = [
    'SECRET_KEY',
    'LOG_LEVEL',
    'LOG_DIR',
    'SENTRY_DSN'
]
