"""
Core package for the newsletter subscription service.

This package contains the components that provide the foundation for the
application:
- Application factory pattern for creating Flask instances
- Logging with structured output and Sentry integration
- Request middleware for request ids and timing
- Health check endpoint
- Input validation utilities
"""

import logging

# Configure module logger
logger = logging.getLogger(__name__)

# Version information
__version__ = '0.1.0'
